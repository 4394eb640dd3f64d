import pytest

from msi_approle.exceptions import AmbiguousLookup, AssignmentNotConfirmed
from msi_approle.workflow import grant_app_role

from .conftest import make_app


def test_scenario_create_fails_but_role_is_confirmed(scenario_directory):
    result = grant_app_role(scenario_directory, "Api1", "Admin", "Msi1")

    assert result.role_id == "role-123"
    assert result.resource_id == "res-1"
    assert result.principal_id == "msi-1"
    assert scenario_directory.calls == [
        ("find_applications_by_name", "Api1"),
        ("find_service_principals_by_name", "Api1"),
        ("find_service_principals_by_name", "Msi1"),
        ("create_role_assignment", "msi-1", "res-1", "role-123"),
        ("list_role_assignments", "msi-1"),
    ]


def test_scenario_role_missing_after_create(scenario_directory):
    scenario_directory.assignments_after_create = []
    with pytest.raises(AssignmentNotConfirmed):
        grant_app_role(scenario_directory, "Api1", "Admin", "Msi1")


def test_scenario_two_applications_stops_immediately(scenario_directory):
    scenario_directory.applications["Api1"] = [make_app("Api1"), make_app("Api1-dev")]
    with pytest.raises(AmbiguousLookup):
        grant_app_role(scenario_directory, "Api1", "Admin", "Msi1")
    assert scenario_directory.calls == [("find_applications_by_name", "Api1")]


def test_ambiguous_msi_aborts_before_mutation(scenario_directory):
    scenario_directory.service_principals["Msi1"] = []
    with pytest.raises(AmbiguousLookup):
        grant_app_role(scenario_directory, "Api1", "Admin", "Msi1")
    assert "create_role_assignment" not in scenario_directory.call_names()


def test_ambiguous_resource_principal_aborts_before_mutation(scenario_directory):
    scenario_directory.service_principals["Api1"] = []
    with pytest.raises(AmbiguousLookup):
        grant_app_role(scenario_directory, "Api1", "Admin", "Msi1")
    assert "create_role_assignment" not in scenario_directory.call_names()


@pytest.mark.parametrize(
    "args", [("", "Admin", "Msi1"), ("Api1", "", "Msi1"), ("Api1", "Admin", "")]
)
def test_empty_arguments_rejected(scenario_directory, args):
    with pytest.raises(ValueError):
        grant_app_role(scenario_directory, *args)
    assert scenario_directory.calls == []
