"""
Cars store: vehicles currently or previously booked for a wash.
"""

from typing import List, Sequence

from ..lookup import names_for_ids
from ..models import CrewMember, Service, VehicleJob, VehicleJobCreate
from .entity_store import EntityStore


class CarsStore(EntityStore[VehicleJob]):
    """Store for the cars table, newest first"""

    table = "cars"
    entity_label = "car"
    row_model = VehicleJob
    create_model = VehicleJobCreate
    order_column = "created_at"
    ascending = False
    prepend_created = True


def crew_names(car: VehicleJob, crew_members: Sequence[CrewMember]) -> List[str]:
    """Names of the crew assigned to a car; unknown ids are skipped"""
    return names_for_ids(car.crew, crew_members)


def service_names(car: VehicleJob, services: Sequence[Service]) -> List[str]:
    return names_for_ids(car.services, services)
