"""Builders for raw introspection mappings used across tests."""


def named(name, kind="SCALAR"):
    return {"kind": kind, "name": name, "ofType": None}


def non_null(of_type):
    return {"kind": "NON_NULL", "name": None, "ofType": of_type}


def list_of(of_type):
    return {"kind": "LIST", "name": None, "ofType": of_type}


def field(name, type_ref, args=(), description=None):
    return {
        "name": name,
        "description": description,
        "args": [{"name": n, "description": None, "type": t, "defaultValue": None} for n, t in args],
        "type": type_ref,
    }


def object_type(name, fields):
    return {"kind": "OBJECT", "name": name, "description": None, "fields": fields}


def scalar_type(name):
    return {"kind": "SCALAR", "name": name, "description": None, "fields": None}
