import json

import pytest
import responses

from tcclient.group import Group, GroupService
from tcclient.rest import RestHelper, TeamCityError

BASE = "http://tc.example.com/app/rest/"
GROUPS = BASE + "userGroups/"
GROUP_JSON = {
    "key": "TESTGROUPKEY",
    "name": "Test Group Name",
    "description": "Test Group Description",
}


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def service():
    return GroupService(RestHelper(BASE))


def _new_group():
    return Group("TESTGROUPKEY", "Test Group Name", "Test Group Description")


def test_key_required():
    with pytest.raises(ValueError, match="Key is required"):
        Group("", "Test Group Name")


def test_name_required():
    with pytest.raises(ValueError, match="Name is required"):
        Group("TESTGROUPKEY", "")


def test_description_omitted_when_empty():
    assert Group("K", "N").to_json() == {"key": "K", "name": "N"}


def test_json_round_trip():
    assert Group.from_json(_new_group().to_json()) == _new_group()


def test_create(rsps, service):
    rsps.add(responses.POST, GROUPS, json=GROUP_JSON)
    new_group = _new_group()
    actual = service.create(new_group)
    assert actual.key == new_group.key
    assert actual.name == new_group.name
    assert actual.description == new_group.description
    assert json.loads(rsps.calls[0].request.body) == GROUP_JSON


def test_get_by_key(rsps, service):
    rsps.add(responses.GET, GROUPS + "key%3ATESTGROUPKEY", json=GROUP_JSON)
    actual = service.get_by_key("TESTGROUPKEY")
    assert actual == _new_group()


def test_delete_then_get_is_404(rsps, service):
    rsps.add(responses.DELETE, GROUPS + "key%3ATESTGROUPKEY", status=204)
    rsps.add(responses.GET, GROUPS + "key%3ATESTGROUPKEY", status=404)
    assert service.delete("TESTGROUPKEY") is None
    with pytest.raises(TeamCityError) as info:
        service.get_by_key("TESTGROUPKEY")
    assert "404" in str(info.value)