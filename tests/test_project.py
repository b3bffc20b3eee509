import json

import pytest
import responses

from tcclient.parameter import Parameter, Parameters, ParameterType
from tcclient.project import BuildTypeReference, Project, ProjectReference, ProjectService
from tcclient.rest import RestHelper, TeamCityError

BASE = "http://tc.example.com/app/rest/"
PROJECTS = BASE + "projects/"


@pytest.fixture
def rsps():
    with responses.RequestsMock(assert_all_requests_are_fired=False) as mock:
        yield mock


@pytest.fixture
def service():
    return ProjectService(RestHelper(BASE))


def _add_name_and_description(rsps, pid):
    rsps.add(responses.PUT, f"{PROJECTS}{pid}/name", body="")
    rsps.add(responses.PUT, f"{PROJECTS}{pid}/description", body="")


def _urls(rsps):
    return [(c.request.method, c.request.url) for c in rsps.calls]


def test_name_required():
    with pytest.raises(ValueError, match="name is required"):
        Project("", "", "")


def test_parent_reference_from_constructor():
    child = Project("ChildProject", "Child Project", "ProjectTest")
    assert child.parent_project == ProjectReference(id="ProjectTest")
    assert Project("Top").parent_project is None


def test_set_parent_project():
    project = Project("P")
    project.set_parent_project("NewParent")
    assert project.parent_project_id == "NewParent"
    assert project.parent_project.id == "NewParent"


def test_reference():
    project = Project("P", "desc", id="P1", web_url="http://tc.example.com/p")
    assert project.reference() == ProjectReference(
        id="P1", name="P", description="desc", web_url="http://tc.example.com/p"
    )


def test_json_round_trip():
    project = Project(
        "P",
        "desc",
        "Parent",
        id="Parent_P",
        parameters=Parameters([Parameter("a", "1")]),
        build_types=[BuildTypeReference("Parent_P_B", "B", "Parent_P")],
        child_projects=[ProjectReference(id="Parent_P_C", name="C")],
    )
    assert Project.from_json(project.to_json()) == project


def test_create(rsps, service):
    rsps.add(responses.POST, PROJECTS, json={"id": "ProjectTest", "name": "ProjectTest"})
    _add_name_and_description(rsps, "ProjectTest")
    rsps.add(
        responses.GET,
        PROJECTS + "id%3AProjectTest",
        json={"id": "ProjectTest", "name": "ProjectTest", "description": "Test Project Description"},
    )
    new_project = Project("ProjectTest", "Test Project Description")
    actual = service.create(new_project)
    assert actual.id == "ProjectTest"
    assert actual.name == new_project.name
    assert actual.description == new_project.description
    assert rsps.calls[2].request.body == b"Test Project Description"


def test_create_with_parent(rsps, service):
    rsps.add(responses.POST, PROJECTS, json={"id": "ProjectTest_ChildProject"})
    _add_name_and_description(rsps, "ProjectTest_ChildProject")
    rsps.add(
        responses.GET,
        PROJECTS + "id%3AProjectTest_ChildProject",
        json={
            "id": "ProjectTest_ChildProject",
            "name": "ChildProject",
            "parentProjectId": "ProjectTest",
            "parentProject": {"id": "ProjectTest"},
        },
    )
    child = Project("ChildProject", "Child Project", "ProjectTest")
    actual = service.create(child)
    sent = json.loads(rsps.calls[0].request.body)
    assert sent["parentProject"] == {"id": "ProjectTest"}
    assert actual.parent_project_id == "ProjectTest"
    assert actual.parent_project.id == "ProjectTest"
    assert actual.id == "ProjectTest_ChildProject"


def test_update_with_same_parent_does_not_reparent(rsps, service):
    body = {
        "id": "ParentProject_ChildProject",
        "name": "ChildProject",
        "parentProjectId": "ParentProject",
        "parentProject": {"id": "ParentProject"},
    }
    _add_name_and_description(rsps, "ParentProject_ChildProject")
    rsps.add(responses.GET, PROJECTS + "id%3AParentProject_ChildProject", json=body)
    updated = service.update(Project.from_json(body))
    assert updated.name == "ChildProject"
    assert not any(url.endswith("/parentProject") for _, url in _urls(rsps))


def test_update_parent(rsps, service):
    before = {"id": "C", "name": "C", "parentProjectId": "ProjectTest"}
    after = {"id": "C", "name": "C", "parentProjectId": "NewParent", "parentProject": {"id": "NewParent"}}
    _add_name_and_description(rsps, "C")
    rsps.add(responses.GET, PROJECTS + "id%3AC", json=before)
    rsps.add(responses.PUT, PROJECTS + "C/parentProject", json={"id": "NewParent"})
    rsps.add(responses.GET, PROJECTS + "id%3AC", json=after)
    project = Project.from_json(before)
    project.set_parent_project("NewParent")
    actual = service.update(project)
    assert actual.parent_project_id == "NewParent"
    assert actual.parent_project.id == "NewParent"
    assert ("PUT", PROJECTS + "C/parentProject") in _urls(rsps)


def test_update_parameters(rsps, service):
    _add_name_and_description(rsps, "ProjectTest")
    rsps.add(responses.GET, PROJECTS + "id%3AProjectTest", json={"id": "ProjectTest", "name": "ProjectTest"})
    rsps.add(responses.PUT, PROJECTS + "ProjectTest/parameters", json={})
    rsps.add(
        responses.GET,
        PROJECTS + "id%3AProjectTest",
        json={
            "id": "ProjectTest",
            "name": "ProjectTest",
            "parameters": {
                "count": 3,
                "property": [
                    {"name": "param1", "value": "value1"},
                    {"name": "param2", "value": "value2"},
                    {"name": "inherited", "value": "x", "inherited": True},
                ],
            },
        },
    )
    project = Project("ProjectTest", id="ProjectTest")
    project.parameters.add_or_replace_value(ParameterType.CONFIGURATION, "param1", "value1")
    project.parameters.add_or_replace_value(ParameterType.CONFIGURATION, "param2", "value2")
    updated = service.update(project)
    props = updated.parameters.to_properties()
    assert props.get("param1") == "value1"
    assert props.get("param2") == "value2"
    assert "inherited" not in props
    sent = json.loads(rsps.calls[3].request.body)
    assert sent["count"] == 2


def test_get_by_name_root(rsps, service):
    rsps.add(
        responses.GET,
        PROJECTS + "name%3A%3CRoot%20project%3E",
        json={"id": "_Root", "name": "<Root project>"},
    )
    actual = service.get_by_name("<Root project>")
    assert actual.name == "<Root project>"
    assert actual.parameters is None


def test_child_projects_and_build_types(rsps, service):
    rsps.add(
        responses.GET,
        PROJECTS + "id%3AProjectTest",
        json={
            "id": "ProjectTest",
            "name": "ProjectTest",
            "buildTypes": {
                "count": 2,
                "buildType": [{"id": "ProjectTest_Build1", "name": "Build1"}, {"id": "ProjectTest_Build2", "name": "Build2"}],
            },
            "projects": {
                "count": 2,
                "project": [
                    {"id": "ProjectTest_ChildProjectTest1", "name": "ChildProjectTest1"},
                    {"id": "ProjectTest_ChildProjectTest2", "name": "ChildProjectTest2"},
                ],
            },
        },
    )
    actual = service.get_by_id("ProjectTest")
    assert len(actual.build_types) == 2
    assert {b.id for b in actual.build_types} == {"ProjectTest_Build1", "ProjectTest_Build2"}
    children = {p.id: p.name for p in actual.child_projects}
    assert children == {
        "ProjectTest_ChildProjectTest1": "ChildProjectTest1",
        "ProjectTest_ChildProjectTest2": "ChildProjectTest2",
    }


def test_unauthorized_is_reported(rsps, service):
    rsps.add(responses.POST, PROJECTS, status=401, body="Authentication required")
    with pytest.raises(TeamCityError) as info:
        service.create(Project("ProjectTest", "Test Project Description"))
    assert "401" in str(info.value)


def test_delete_then_get_fails(rsps, service):
    rsps.add(responses.DELETE, PROJECTS + "ProjectTest", status=204)
    rsps.add(responses.GET, PROJECTS + "id%3AProjectTest", status=404)
    assert service.delete("ProjectTest") is None
    with pytest.raises(TeamCityError) as info:
        service.get_by_id("ProjectTest")
    assert info.value.status_code == 404