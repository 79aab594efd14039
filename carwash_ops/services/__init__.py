"""
Entity stores and the remote data service they talk to.
"""

from .remote_data import RemoteDataService, SupabaseDataService, create_data_service
from .entity_store import EntityStore
from .cars import CarsStore
from .catalog import ServicesStore
from .crew import CrewMembersStore
from .packages import ServicePackagesStore

__all__ = [
    'RemoteDataService',
    'SupabaseDataService',
    'create_data_service',
    'EntityStore',
    'CarsStore',
    'ServicesStore',
    'CrewMembersStore',
    'ServicePackagesStore'
]
