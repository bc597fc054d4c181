from vault_client.model import (
    VaultAuthResponse,
    VaultClientTokenResponse,
    VaultInitResponse,
    VaultListResponse,
    VaultResponse,
    VaultTokenAuthRequest,
)
from vault_client.protocol import VaultCredentials


def test_credentials_defaults():
    credentials = VaultCredentials(token="s.abc")
    assert credentials.token == "s.abc"
    assert credentials.lease_duration is None
    assert credentials.renewable is False
    assert credentials.policies == ()
    assert not credentials.is_blank()


def test_credentials_blank():
    assert VaultCredentials(token="").is_blank()
    assert VaultCredentials(token=" \t").is_blank()


def test_credentials_repr_masks_token():
    assert "s.abc" not in repr(VaultCredentials(token="s.abc"))


def test_response_ignores_unknown_fields():
    response = VaultResponse.model_validate(
        {"data": {"password": "pw"}, "lease_duration": 60, "wrap_info": None}
    )
    assert response.data == {"password": "pw"}
    assert response.lease_duration == 60
    assert response.renewable is False


def test_list_response_from_payload():
    response = VaultListResponse.from_payload({"data": {"keys": ["a", "b/"]}})
    assert response.keys == ["a", "b/"]
    assert VaultListResponse.from_payload({}).keys == []


def test_init_response():
    response = VaultInitResponse.model_validate(
        {"keys": ["k1", "k2"], "keys_base64": ["b1", "b2"], "root_token": "s.root"}
    )
    assert response.keys == ["k1", "k2"]
    assert response.root_token == "s.root"


def test_auth_response_from_payload():
    response = VaultAuthResponse.from_payload(
        {"auth": {"client_token": "s.child", "policies": ["default"], "metadata": None}}
    )
    assert response.client_token == "s.child"
    assert response.policies == ["default"]
    assert response.metadata is None
    assert response.lease_duration == 0


def test_client_token_response():
    response = VaultClientTokenResponse.from_payload(
        {"data": {"id": "s.self", "policies": ["root"], "ttl": 0, "path": "auth/token/root"}}
    )
    assert response.id == "s.self"
    assert response.path == "auth/token/root"


def test_token_request_drops_unset_fields():
    request = VaultTokenAuthRequest(policies=["app"], ttl="1h")
    assert request.to_payload() == {"policies": ["app"], "ttl": "1h"}
