"""
Service catalog store.
"""

from ..models import Service, ServiceCreate
from .entity_store import EntityStore


class ServicesStore(EntityStore[Service]):
    table = "services"
    entity_label = "service"
    row_model = Service
    create_model = ServiceCreate
    prepend_created = True
