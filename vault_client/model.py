# vault_client/model.py
"""Request and response models for the Vault HTTP API."""

from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VaultModel(BaseModel):
    model_config = ConfigDict(extra="ignore", populate_by_name=True)


class VaultResponse(VaultModel):
    """A secret read from Vault."""

    data: dict[str, Any] = Field(default_factory=dict)
    lease_id: str | None = None
    lease_duration: int | None = None
    renewable: bool = False


class VaultListResponse(VaultModel):
    """Keys below a secret path. Folders end with ``/``."""

    keys: list[str] = Field(default_factory=list)

    @classmethod
    def from_payload(cls, payload: dict) -> "VaultListResponse":
        return cls.model_validate(payload.get("data") or {})


class VaultInitResponse(VaultModel):
    """Unseal keys and the initial root token returned by ``sys/init``."""

    keys: list[str] = Field(default_factory=list)
    keys_base64: list[str] = Field(default_factory=list)
    root_token: str


class VaultSealStatusResponse(VaultModel):
    sealed: bool
    t: int = Field(0, description="Unseal threshold")
    n: int = Field(0, description="Number of key shares")
    progress: int = 0


class VaultPolicy(VaultModel):
    """An ACL policy document in HCL or JSON."""

    rules: str


class VaultAuthResponse(VaultModel):
    """The ``auth`` block returned by login and token-create endpoints."""

    client_token: str
    accessor: str | None = None
    policies: list[str] = Field(default_factory=list)
    metadata: dict[str, str] | None = None
    lease_duration: int = 0
    renewable: bool = False

    @classmethod
    def from_payload(cls, payload: dict) -> "VaultAuthResponse":
        return cls.model_validate(payload.get("auth") or {})


class VaultClientTokenResponse(VaultModel):
    """Token details returned by ``auth/token/lookup-self``."""

    id: str
    policies: list[str] = Field(default_factory=list)
    path: str | None = None
    meta: dict[str, str] | None = None
    display_name: str | None = None
    num_uses: int = 0
    ttl: int = 0

    @classmethod
    def from_payload(cls, payload: dict) -> "VaultClientTokenResponse":
        return cls.model_validate(payload.get("data") or {})


class VaultTokenAuthRequest(VaultModel):
    """Parameters for ``auth/token/create``. Unset fields are not sent."""

    id: str | None = None
    policies: list[str] | None = None
    meta: dict[str, str] | None = None
    no_parent: bool | None = None
    no_default_policy: bool | None = None
    ttl: str | None = None
    display_name: str | None = None
    num_uses: int | None = None

    def to_payload(self) -> dict:
        return self.model_dump(exclude_none=True)
