import pytest

from app.actions.chat import format_chat_completion
from app.actions.search import format_search_results
from app.errors import PerplexityResponseError
from tests.app.test_helpers import chat_response


def test_chat_completion_with_citations():
    data = chat_response("Paris", citations=["https://a.com", "https://b.com"])

    assert format_chat_completion(data) == "Paris\n\nCitations:\n[1] https://a.com\n[2] https://b.com\n"


def test_chat_completion_without_citations():
    assert format_chat_completion(chat_response("Paris")) == "Paris"


@pytest.mark.parametrize("citations", [[], "https://a.com", None])
def test_chat_completion_ignores_empty_or_non_list_citations(citations):
    data = chat_response("Paris")
    data["citations"] = citations

    assert format_chat_completion(data) == "Paris"


@pytest.mark.parametrize("data", [{}, {"choices": []}, {"choices": [{"message": {}}]}, {"choices": [{"message": {"content": None}}]}])
def test_chat_completion_with_unexpected_shape(data):
    with pytest.raises(PerplexityResponseError):
        format_chat_completion(data)


@pytest.mark.parametrize("data", [{}, {"results": []}, {"results": "nope"}, {"results": None}])
def test_search_without_results(data):
    assert format_search_results(data) == "No search results found."


def test_search_single_result():
    data = {"results": [{"title": "T", "url": "https://x"}]}

    assert format_search_results(data) == "Found 1 search results:\n\n1. **T**\n   URL: https://x\n\n"


def test_search_optional_fields_keep_order():
    data = {
        "results": [
            {"title": "First", "url": "https://1", "snippet": "About one", "date": "2024-05-01"},
            {"title": "Second", "url": "https://2", "date": "2024-06-01"},
            {"title": "Third", "url": "https://3", "snippet": ""},
        ]
    }

    assert format_search_results(data) == (
        "Found 3 search results:\n\n"
        "1. **First**\n   URL: https://1\n   About one\n   Date: 2024-05-01\n\n"
        "2. **Second**\n   URL: https://2\n   Date: 2024-06-01\n\n"
        "3. **Third**\n   URL: https://3\n\n"
    )


def test_search_result_missing_fields_render_empty():
    assert format_search_results({"results": [{}]}) == "Found 1 search results:\n\n1. ****\n   URL: \n\n"


def test_search_falsy_optional_fields_are_omitted():
    data = {"results": [{"title": "T", "url": "u", "snippet": 0, "date": False}]}

    assert format_search_results(data) == "Found 1 search results:\n\n1. **T**\n   URL: u\n\n"


def test_search_non_string_optional_fields_are_rendered():
    data = {"results": [{"title": "T", "url": "u", "snippet": 42, "date": 2024}]}

    assert format_search_results(data) == "Found 1 search results:\n\n1. **T**\n   URL: u\n   42\n   Date: 2024\n\n"
