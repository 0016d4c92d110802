"""Tests for the command-line driver."""
import pytest

from cardgrid import __main__ as cli
from cardgrid.clients import NoResults


@pytest.fixture
def fake_search(mocker):
    images = {"island": "https://img.test/island.jpg"}

    def find(self, query, cancel=None):
        if query not in images:
            raise NoResults(f"No cards match {query!r}")
        return images[query]

    return mocker.patch.object(cli.CardSearchClient, "find_image_url", autospec=True, side_effect=find)


def test_resolves_each_query(fake_search, capsys):
    assert cli.main(["island", "nothing", "--log-level", "WARNING"]) == 0

    out = capsys.readouterr().out
    assert "[ 0] resolved" in out
    assert "https://img.test/island.jpg" in out
    assert "[ 1] failed" in out
    assert fake_search.call_count == 2


def test_missing_category_fails(fake_search, capsys):
    assert cli.main(["island", "--categories", "abc"]) == 1
    assert "not in grid of 0" in capsys.readouterr().out
    fake_search.assert_not_called()


def test_extra_queries_ignored(fake_search, capsys):
    queries = ["island"] * 16
    assert cli.main(queries + ["--log-level", "WARNING"]) == 0
    assert fake_search.call_count == 15
    assert "ignoring the rest" in capsys.readouterr().out
