import pytest
from pydantic import BaseModel

from db_manager import InMemoryRecordStore, ObfuscatedRepository
from errors import NonObfuscatedIdError, RecordNotFoundError
from models import configure


class User(BaseModel):
    id: int
    name: str


@pytest.fixture
def store():
    return InMemoryRecordStore("User", [User(id=1, name="ada"), User(id=2, name="grace"), User(id=3, name="linus")])


@pytest.fixture
def users(store):
    return ObfuscatedRepository(configure("User"), store)


def test_to_param_hides_the_id(users, store):
    user = store.get(1)
    param = users.to_param(user)
    assert param.startswith("user-")
    assert param != "user-1"


def test_find_by_token(users, store):
    user = store.get(2)
    assert users.find(users.to_param(user)) == user


def test_deobfuscate_id_reverses_to_param(users, store):
    user = store.get(3)
    assert users.deobfuscate_id(users.to_param(user)) == 3


def test_find_many_keeps_order(users, store):
    params = [users.to_param(store.get(i)) for i in (3, 1)]
    assert [u.id for u in users.find(params)] == [3, 1]
    assert users.find([]) == []


def test_find_raw_id_without_enforcement(users):
    assert users.find("1").name == "ada"


def test_find_missing_record(users):
    with pytest.raises(RecordNotFoundError):
        users.find("99")
    with pytest.raises(RecordNotFoundError):
        users.find(["1", "99"])


def test_different_types_get_different_params(store):
    posts = ObfuscatedRepository(configure("Post"), InMemoryRecordStore("Post"))
    users = ObfuscatedRepository(configure("User"), store)
    user = store.get(1)
    assert users.to_param(user) != posts.to_param(user)


def test_explicit_spins_give_different_params(store):
    user = store.get(1)
    first = ObfuscatedRepository(configure("User", spin=987_654_321), store)
    second = ObfuscatedRepository(configure("User", spin=123_456_789), store)
    assert first.config.spin == 987_654_321
    assert first.find(first.to_param(user)) == user
    assert second.find(second.to_param(user)) == user


def test_enforced_repository(store):
    users = ObfuscatedRepository(configure("User", prefix="user", enforce_obfuscated=True), store)
    user = store.get(1)
    with pytest.raises(RecordNotFoundError):
        users.find("1")
    with pytest.raises(RecordNotFoundError):
        users.find(["1"])
    assert users.find(users.to_param(user)) == user
    assert users.find([users.to_param(user)]) == [user]


def test_strict_repository(store):
    users = ObfuscatedRepository(
        configure("User", prefix="user", enforce_obfuscated=True, raise_on_violation=True), store
    )
    with pytest.raises(NonObfuscatedIdError, match="prefix 'user-'"):
        users.find("1")
    with pytest.raises(NonObfuscatedIdError):
        users.find(["1"])
