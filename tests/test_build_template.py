import json

import pytest
import responses

from tcclient.build_template import BuildTemplateService
from tcclient.rest import RestHelper, TeamCityError

BASE = "http://tc.example.com/app/rest/"
TEMPLATES = BASE + "buildTypes/BuildTemplateProject_PullRequest/templates/"


@pytest.fixture
def rsps():
    with responses.RequestsMock() as mock:
        yield mock


@pytest.fixture
def service():
    return BuildTemplateService("BuildTemplateProject_PullRequest", RestHelper(BASE))


def test_attach_posts_template_reference(rsps, service):
    rsps.add(
        responses.POST,
        TEMPLATES,
        json={"id": "BuildTemplateProject_Template", "name": "Template",
              "projectId": "BuildTemplateProject"},
        status=200,
    )

    actual = service.attach("BuildTemplateProject_Template")

    assert json.loads(rsps.calls[0].request.body) == {"id": "BuildTemplateProject_Template"}
    assert actual.id == "BuildTemplateProject_Template"
    assert actual.name == "Template"
    assert actual.project_id == "BuildTemplateProject"


def test_detach_deletes_by_template_id(rsps, service):
    rsps.add(responses.DELETE, TEMPLATES + "BuildTemplateProject_Template1", status=204)

    assert service.detach("BuildTemplateProject_Template1") is None

    assert rsps.calls[0].request.url == TEMPLATES + "BuildTemplateProject_Template1"


def test_attach_failure_raises(rsps, service):
    rsps.add(responses.POST, TEMPLATES, body="missing", status=404)

    with pytest.raises(TeamCityError) as info:
        service.attach("Nope")

    assert info.value.status_code == 404