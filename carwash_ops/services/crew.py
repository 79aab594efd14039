from ..models import CrewMember, CrewMemberCreate
from .entity_store import EntityStore


class CrewMembersStore(EntityStore[CrewMember]):
    table = "crew_members"
    entity_label = "crew member"
    row_model = CrewMember
    create_model = CrewMemberCreate
