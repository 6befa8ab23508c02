#!/usr/bin/env python3
"""Demonstration of collection synthesis from an offline schema.

This script shows how to:
1. Build IR from SDL (no network needed)
2. Assemble a Postman collection
3. Inspect a synthesized request and save the collection

Point `create_collection` at a live endpoint to introspect it instead.
"""

import tempfile
from pathlib import Path

from gql_postman.core import CollectionAssembler, IntrospectionParser, save_collection

SDL = """
type Query {
  "Look up a single book"
  book(isbn: ID!): Book
  books(author: String, first: Int): [Book!]!
}

type Mutation {
  addBook(title: String!, author: String!, year: Int, tags: [String!]): Book
}

type Book {
  isbn: ID!
  title: String
  author: Author
}

type Author {
  name: String
}
"""


def main():
    print("=== GraphQL to Postman Demo ===\n")

    with tempfile.TemporaryDirectory() as tmpdir:
        schema_path = Path(tmpdir) / "schema.graphqls"
        schema_path.write_text(SDL)

        print("1. Parsing schema...")
        ir = IntrospectionParser.from_file(schema_path).parse()
        print(f"   Found {len(ir.types)} types (introspection types included)")

        print("\n2. Assembling collection...")
        collection = CollectionAssembler(ir, "https://books.example.com/graphql").assemble()
        print(f"   {collection.info.name}: {len(collection.item)} requests")

        print("\n3. The addBook request:")
        add_book = next(item for item in collection.item if item.name == "addBook")
        print(add_book.request.body.graphql.query)
        print(add_book.request.body.graphql.variables)

        output = save_collection(collection, Path(tmpdir) / "books.postman_collection.json")
        print(f"\nSaved to {output} ({output.stat().st_size} bytes)")


if __name__ == "__main__":
    main()
