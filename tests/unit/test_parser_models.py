from __future__ import annotations

from dataclasses import FrozenInstanceError

import pytest

from jira_api_client.core.errors import JiraProtocolError
from jira_api_client.core.models import Page, parse_page
from jira_api_client.issues.models import Board, CustomField, Issue
from jira_api_client.issues.parser import (
    parse_create_response,
    parse_issue,
    parse_issue_page,
)
from tests.shared.payloads import make_create_issue, make_issue_payload, make_page_payload


def test_parse_issue_page_maps_camel_case_fields():
    page = parse_issue_page(make_page_payload(start_at=50, max_results=50, total=52))

    assert page.expand == "names,schema"
    assert (page.start_at, page.max_results, page.total) == (50, 50, 52)
    assert [issue.key for issue in page.values] == ["PRJ-50", "PRJ-51"]
    assert page.values[0].url == "https://jira.example.com/rest/agile/1.0/issue/10050"
    assert page.values[0].fields["summary"] == "issue 50"


def test_parse_page_defaults_missing_expand_to_empty_string():
    page = parse_issue_page(make_page_payload(start_at=0, max_results=5, total=0, expand=None))
    assert page.expand == ""
    assert page.values == ()


@pytest.mark.parametrize(
    "payload",
    [
        None,
        [],
        {"maxResults": "50", "startAt": 0, "total": 1, "values": []},
        {"maxResults": 50, "startAt": -1, "total": 1, "values": []},
        {"maxResults": 50, "startAt": 0, "total": True, "values": []},
        {"maxResults": 50, "startAt": 0, "total": 1, "values": {}},
        {"maxResults": 50, "startAt": 0, "total": 1, "values": [1]},
        {"maxResults": 50, "startAt": 0, "values": []},
    ],
    ids=[
        "null",
        "array-root",
        "string-count",
        "negative-offset",
        "bool-total",
        "values-object",
        "values-scalar",
        "missing-total",
    ],
)
def test_parse_page_rejects_malformed_payloads(payload):
    with pytest.raises(JiraProtocolError):
        parse_page(payload, lambda item: item)


def test_parse_issue_requires_id_and_key():
    with pytest.raises(JiraProtocolError):
        parse_issue({"key": "PRJ-1"})
    issue = parse_issue(make_issue_payload(1))
    assert (issue.id, issue.key) == ("10001", "PRJ-1")


def test_parse_create_response_maps_self_to_url():
    response = parse_create_response(
        {"id": "10000", "key": "PRJ-1", "self": "https://jira.example.com/rest/api/2/issue/10000"}
    )
    assert response.url.endswith("/issue/10000")
    with pytest.raises(JiraProtocolError):
        parse_create_response({"id": "10000", "key": "PRJ-1"})


def test_page_values_are_tuple_and_immutable():
    page = Page(expand="", max_results=2, start_at=0, total=2, values=["a", "b"])
    assert page.values == ("a", "b")
    assert page.next_start_at == 2
    with pytest.raises(FrozenInstanceError):
        page.total = 3  # type: ignore[misc]


def test_issue_fields_are_read_only():
    issue = parse_issue(make_issue_payload(1))
    with pytest.raises(TypeError):
        issue.fields["summary"] = "changed"  # type: ignore[index]


def test_board_id_is_normalized_to_text():
    assert Board(id=12).id == "12"  # type: ignore[arg-type]


def test_create_issue_payload_uses_wire_names():
    payload = make_create_issue().to_payload()
    fields = payload["fields"]

    assert fields["issuetype"] == {"id": "1"}
    assert fields["priority"]["iconUrl"].endswith("major.svg")
    assert fields["priority"]["self"].endswith("/priority/3")
    assert fields["components"] == [{"name": "backend"}]
    assert fields["project"] == {"key": "PRJ"}
    assert fields["reporter"] == {"name": "reporter"}


def test_issue_custom_field_reads_option_shaped_value():
    option = {
        "id": "10400",
        "self": "https://jira.example.com/rest/api/2/customFieldOption/10400",
        "value": "Blue",
    }
    issue = Issue(id="1", key="PRJ-1", fields={"customfield_10010": option, "summary": "s"})

    custom = issue.custom_field("customfield_10010")

    assert custom == CustomField(
        id="10400",
        url="https://jira.example.com/rest/api/2/customFieldOption/10400",
        value="Blue",
    )
    assert custom.to_payload() == option
    assert issue.custom_field("summary") is None
    assert issue.custom_field("customfield_99999") is None


def test_custom_field_requires_id_self_and_value():
    assert CustomField.from_payload({"id": "1", "value": "x"}) is None
    assert CustomField.from_payload(None) is None
