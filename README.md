# tcclient

A Python client for the TeamCity REST API. It models TeamCity entities
(projects, build configurations and templates, parameters, agent
requirements, artifact dependencies, user groups and agent pools) and
provides services that create, read, update and delete them.

## Installation

```
pip install tcclient
```

To run the test suite:

```
pip install "tcclient[test]"
pytest
```

## Building entities

Parameters are typed as configuration, system or environment variables.
System and environment parameters are sent with their `system.` and `env.`
prefixes:

```python
from tcclient.parameter import Parameters, ParameterType

params = Parameters()
params.add_or_replace_value(ParameterType.CONFIGURATION, "config", "value_config")
params.add_or_replace_value(ParameterType.SYSTEM, "system", "value_system")
params.add_or_replace_value(ParameterType.ENVIRONMENT_VARIABLE, "env", "value_env")
params.to_json()
# {"count": 3, "property": [{"name": "config", ...}, {"name": "system.system", ...}, ...]}
```

`Parameters.non_inherited()` returns a copy without inherited parameters,
and `Parameters.to_properties()` converts to a plain
`tcclient.properties.Properties` collection.

Build configuration settings (`tcclient.build_type_options.BuildTypeOptions`)
leave out of their property form the settings TeamCity omits at their
defaults:

```python
from tcclient.build_type_options import BuildTypeOptions

options = BuildTypeOptions.with_defaults()
options.max_simultaneous_builds = 10
props = options.properties()
props.get("maximumNumberOfBuilds")  # "10"
props.get("buildNumberPattern")     # None: still the default
```

`BuildTypeOptions.from_properties(props, template)` reads them back,
keeping defaults for settings not present.

Build configurations and templates are made with `BuildType.create` and
`BuildType.create_template` from `tcclient.build_type`.

Artifact dependencies take their options from
`ArtifactDependencyOptions.create`:

```python
from tcclient.artifact_dep import ArtifactDependency
from tcclient.artifact_dep_options import (
    ArtifactDependencyOptions,
    ArtifactDependencyRevision,
)

options = ArtifactDependencyOptions.create(
    ["rule1", "rule2"], ArtifactDependencyRevision.LATEST_SUCCESSFUL_BUILD, False, ""
)
dependency = ArtifactDependency.create("SourceBuild", options)
```

Agent requirements use the conditions in `Condition`:

```python
from tcclient.agent_requirement import AgentRequirement, Condition

requirement = AgentRequirement.create(Condition.EQUALS, "param", "value")
requirement.name   # "param"
requirement.value  # "value"
```

Invalid arguments to these constructors raise `ValueError`.

## Talking to a server

Each service works through a `RestHelper` bound to the server's
`/app/rest/` base URL and a `requests` session. A request answered with a
non-success status raises `TeamCityError`, whose message starts with the
HTTP status and which carries `status_code` and `body`:

```python
import requests

from tcclient.rest import RestHelper, TeamCityError
from tcclient.project import Project, ProjectService

session = requests.Session()
session.auth = ("admin", "password")
rest = RestHelper("http://localhost:8111/app/rest/", session)

projects = ProjectService(rest)
created = projects.create(Project(name="My Project", description="Demo"))
fetched = projects.get_by_id(created.id)

try:
    projects.get_by_id("DoesNotExist")
except TeamCityError as err:
    print(err.status_code)  # 404
```

The other services follow the same pattern:

- `tcclient.group.GroupService(rest)`
- `tcclient.agent_pool.AgentPoolsService(rest)`
- `tcclient.build_type.BuildTypeService(rest)`
- `tcclient.agent_requirement.AgentRequirementService(build_type_id, rest)`
- `tcclient.dependency.DependencyService(build_type_id, rest)`
- `tcclient.build_template.BuildTemplateService(build_type_id, rest)`

Locators for URLs come from `tcclient.locator`. For example,
`locator_name("<Root Project>")` gives `name%3A%3CRoot%20Project%3E`.

## What this package does not do

- Build features are not supported: there is no service or model for them.
- Build steps are not typed. `BuildTypeService.add_step` and `get_steps`
  exchange steps as plain JSON dictionaries.
- VCS root entries of a build configuration are kept as JSON dictionaries,
  and there is no service for creating VCS roots or attaching them.
- Snapshot dependencies can only be deleted; `DependencyService` creates and
  reads artifact dependencies only.
- Agent pools cannot be updated once created.
- There is no single client object bundling the services and no
  command-line tool; build a `RestHelper` and pass it to each service.