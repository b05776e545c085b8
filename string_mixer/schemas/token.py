from enum import Enum
from pydantic import BaseModel, Field
from typing import List


class TokenPurpose(str, Enum):
    ACCOUNT_VERIFICATION = "account_verification"
    PASSWORD_RESET = "password_reset"
    WORKSPACE_INVITE = "workspace_invite"

    @property
    def link_path(self) -> str:
        return _LINK_PATHS[self]

    @property
    def field_count(self) -> int:
        # identifier + email address for every purpose issued today
        return 2

    @property
    def base64_value(self) -> bool:
        # reset links carry the value base64-encoded in the path
        return self is TokenPurpose.PASSWORD_RESET


_LINK_PATHS = {
    TokenPurpose.ACCOUNT_VERIFICATION: "/account/verify",
    TokenPurpose.PASSWORD_RESET: "/auth/reset-password",
    TokenPurpose.WORKSPACE_INVITE: "/workspace/verify-invite",
}


class MixedToken(BaseModel):
    # value travels in the URL path, key in the k= query parameter
    value: str
    key: str

    model_config = {"frozen": True}


class KeyMetadata(BaseModel):
    count: int = Field(..., ge=0)
    lengths: List[int]
    salt: str = ""

    model_config = {"frozen": True}

    @property
    def total_length(self) -> int:
        return sum(self.lengths)


class IssuedToken(BaseModel):
    purpose: TokenPurpose
    token: MixedToken
    link: str
