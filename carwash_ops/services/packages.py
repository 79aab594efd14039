"""
Service packages store: named bundles of catalog services.
"""

from typing import List, Sequence

from ..lookup import resolve_by_ids
from ..models import Service, ServicePackage, ServicePackageCreate
from .entity_store import EntityStore


class ServicePackagesStore(EntityStore[ServicePackage]):
    table = "service_packages"
    entity_label = "service package"
    row_model = ServicePackage
    create_model = ServicePackageCreate


def included_services(package: ServicePackage, services: Sequence[Service]) -> List[Service]:
    """Catalog services in a package, in package order; dangling ids are dropped"""
    return resolve_by_ids(package.service_ids, services)
