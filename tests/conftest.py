"""Shared fixtures: a small introspection result and its IR."""

import pytest

from gql_postman.core.parser import IntrospectionParser

from builders import field, list_of, named, non_null, object_type, scalar_type


@pytest.fixture
def user_introspection():
    """Response body for a schema with users, a scalar query and one mutation."""
    user = named("User", "OBJECT")
    return {
        "data": {
            "__schema": {
                "queryType": {"name": "Query"},
                "mutationType": {"name": "Mutation"},
                "types": [
                    object_type("Query", [
                        field("user", user, args=[("id", non_null(named("ID")))]),
                        field("users", non_null(list_of(non_null(user))), args=[("first", named("Int"))]),
                        field("hello", named("String")),
                    ]),
                    object_type("Mutation", [
                        field("createUser", user, args=[
                            ("name", non_null(named("String"))),
                            ("email", named("String")),
                        ]),
                    ]),
                    object_type("User", [
                        field("id", non_null(named("ID"))),
                        field("name", named("String"), description="Display name"),
                        field("friend", user),
                    ]),
                    scalar_type("ID"),
                    scalar_type("String"),
                    scalar_type("Int"),
                ],
            }
        }
    }


@pytest.fixture
def user_schema(user_introspection):
    return IntrospectionParser(user_introspection).parse()


@pytest.fixture
def query_only_introspection(user_introspection):
    schema = user_introspection["data"]["__schema"]
    schema["types"] = [t for t in schema["types"] if t["name"] != "Mutation"]
    schema["mutationType"] = None
    return user_introspection
