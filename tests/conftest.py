import pytest

from enr import ENR, V4Scheme

# The example record of EIP-778.
# See: https://github.com/ethereum/EIPs/blob/master/EIPS/eip-778.md
PRIVATE_KEY = bytes.fromhex(
    "b71c71a67e1177ad4e901695e1b4b9ee17ae16c6668d313eac2f96dbcda3f291"
)
PUBLIC_KEY = bytes.fromhex(
    "03ca634cae0d49acb401d8a4c6b6fe8c55b70d115bf400769cc1400f3258cd3138"
)
NODE_ID = "a448f24c6d18e575453db13171562b71999873db5b286df957af199ec94617f7"
RECORD_TEXT = (
    "enr:-IS4QHCYrYZbAKWCBRlAy5zzaDZXJBGkcnh4MHcBFZntXNFrdvJjX04jRzjzCBOo"
    "nrkTfj499SZuOh8R33Ls8RRcy5wBgmlkgnY0gmlwhH8AAAGJc2VjcDI1NmsxoQPKY0yu"
    "DUmstAHYpMa2_oxVtw0RW_QAdpzBQA8yWM0xOIN1ZHCCdl8"
)
RECORD_BYTES = bytes.fromhex(
    "f884b8407098ad865b00a582051940cb9cf36836572411a47278783077011599ed5c"
    "d16b76f2635f4e234738f30813a89eb9137e3e3df5266e3a1f11df72ecf1145ccb9c"
    "01826964827634826970847f00000189736563703235366b31a103ca634cae0d49ac"
    "b401d8a4c6b6fe8c55b70d115bf400769cc1400f3258cd31388375647082765f"
)


@pytest.fixture
def scheme() -> V4Scheme:
    return V4Scheme()


@pytest.fixture
def secret(scheme):
    return scheme.secret_from_bytes(PRIVATE_KEY)


@pytest.fixture
def vector() -> ENR:
    return ENR.decode(RECORD_BYTES)
