"""Tests for the gql-postman command line and collection persistence."""

import json
import logging

import pytest
from click.testing import CliRunner
from rich.logging import RichHandler

from gql_postman.cli import configure_logging, default_output, main
from gql_postman.core.assembler import CollectionAssembler
from gql_postman.core.collection import POSTMAN_SCHEMA_URL, save_collection

URL = "http://localhost:4000/graphql"

SDL = """
type Query {
  user(id: ID!): User
  users: [User!]!
}

type Mutation {
  createUser(name: String!): User
}

type User {
  id: ID!
  name: String
}
"""


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def sdl_file(tmp_path):
    path = tmp_path / "schema.graphqls"
    path.write_text(SDL)
    return path


class TestSaveCollection:

    def test_tab_indented(self, tmp_path, user_schema):
        collection = CollectionAssembler(user_schema, URL).assemble()
        path = save_collection(collection, tmp_path / "nested" / "out.json")

        text = path.read_text()
        assert text.startswith('{\n\t"info": {\n\t\t"name": "localhost:4000-autoGQL"')
        assert json.loads(text) == collection.to_dict()


class TestGenerateCommand:
    """Tests for `gql-postman generate`."""

    def test_offline_schema(self, runner, sdl_file, tmp_path):
        output = tmp_path / "collection.json"
        result = runner.invoke(main, ["generate", "-u", URL, "-s", str(sdl_file), "-o", str(output)])

        assert result.exit_code == 0, result.output
        assert "Generated 3 requests" in result.output
        document = json.loads(output.read_text())
        assert document["info"] == {"name": "localhost:4000-autoGQL", "schema": POSTMAN_SCHEMA_URL}
        assert [item["name"] for item in document["item"]] == ["user", "users", "createUser"]
        assert document["item"][0]["request"]["url"]["host"] == ["localhost:4000"]

    def test_invalid_url(self, runner, sdl_file):
        result = runner.invoke(main, ["generate", "-u", "localhost/graphql", "-s", str(sdl_file)])
        assert result.exit_code == 2
        assert "URL must be absolute" in result.output

    def test_invalid_schema_file(self, runner, tmp_path):
        path = tmp_path / "broken.graphql"
        path.write_text("type Query {")
        result = runner.invoke(main, ["generate", "-u", URL, "-s", str(path), "-o", str(tmp_path / "x.json")])
        assert result.exit_code == 1
        assert "Invalid SDL" in result.output
        assert not (tmp_path / "x.json").exists()

    def test_malformed_header(self, runner, monkeypatch):
        monkeypatch.delenv("GQL_POSTMAN_TOKEN", raising=False)
        result = runner.invoke(main, ["generate", "-u", URL, "-H", "not-a-header"])
        assert result.exit_code == 2
        assert "Name: value" in result.output

    def test_default_output_name(self):
        assert default_output("https://api.example.com/graphql").name == "api.example.com.postman_collection.json"

    def test_live_request_headers(self, runner, monkeypatch, tmp_path, user_schema):
        captured = {}

        async def fake_create_collection(url, *, auth, timeout, template_dir):
            captured["url"] = url
            captured["headers"] = auth.get_headers()
            captured["timeout"] = timeout
            return CollectionAssembler(user_schema, url).assemble()

        monkeypatch.setattr("gql_postman.cli.create_collection", fake_create_collection)
        monkeypatch.delenv("GQL_POSTMAN_TOKEN", raising=False)
        monkeypatch.delenv("GQL_POSTMAN_API_KEY", raising=False)
        result = runner.invoke(main, [
            "generate", "-u", URL, "-o", str(tmp_path / "out.json"),
            "-H", "X-Trace: 1",
            "--api-key", "secret",
            "--token", "abc",
            "--timeout", "5",
        ])

        assert result.exit_code == 0, result.output
        assert captured == {
            "url": URL,
            "headers": {"X-Trace": "1", "x-api-key": "secret", "Authorization": "Bearer abc"},
            "timeout": 5.0,
        }

    def test_api_key_custom_header(self, runner, monkeypatch, tmp_path, user_schema):
        captured = {}

        async def fake_create_collection(url, *, auth, timeout, template_dir):
            captured["headers"] = auth.get_headers()
            return CollectionAssembler(user_schema, url).assemble()

        monkeypatch.setattr("gql_postman.cli.create_collection", fake_create_collection)
        monkeypatch.delenv("GQL_POSTMAN_TOKEN", raising=False)
        monkeypatch.setenv("GQL_POSTMAN_API_KEY", "from-env")
        result = runner.invoke(main, [
            "generate", "-u", URL, "-o", str(tmp_path / "out.json"), "--api-key-header", "X-Api-Token",
        ])

        assert result.exit_code == 0, result.output
        assert captured["headers"] == {"X-Api-Token": "from-env"}


class TestConfigureLogging:

    def test_leaves_configured_root_alone(self, monkeypatch):
        root = logging.getLogger()
        existing = logging.NullHandler()
        monkeypatch.setattr(root, "handlers", [existing])

        configure_logging(verbose=True)
        configure_logging(verbose=True)

        package_logger = logging.getLogger("gql_postman")
        assert root.handlers == [existing]
        assert package_logger.handlers == []
        assert package_logger.propagate
        assert package_logger.level == logging.DEBUG

    def test_installs_rich_handler_on_bare_root(self, monkeypatch):
        root = logging.getLogger()
        monkeypatch.setattr(root, "handlers", [])
        monkeypatch.setattr(root, "level", root.level)

        configure_logging(verbose=False)

        assert len(root.handlers) == 1
        assert isinstance(root.handlers[0], RichHandler)
        assert logging.getLogger("gql_postman").level == logging.INFO
