from .dtos import InvitationResponse, InviteMemberCommand
from .invite_member_use_case import InviteMemberUseCase

__all__ = ["InviteMemberUseCase", "InviteMemberCommand", "InvitationResponse"]
