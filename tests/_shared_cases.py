"""Centralized source cases used across parser/encoder/format tests."""

from __future__ import annotations

from dataclasses import dataclass
import textwrap
from typing import Any


@dataclass(frozen=True, slots=True)
class DocumentCase:
    name: str
    source: str
    expected: dict[str, Any]
    round_trips: bool = False


def _dedent(text: str) -> str:
    return textwrap.dedent(text).lstrip()


DOCUMENT_CASES: tuple[DocumentCase, ...] = (
    DocumentCase(
        name="simple_schema_with_data",
        source="users[2]{id,name}:\n  1,Ada\n  2,Bob\n",
        expected={"users": [{"id": "1", "name": "Ada"}, {"id": "2", "name": "Bob"}]},
        round_trips=True,
    ),
    DocumentCase(
        name="simple_field_assignment",
        source="name: John\nage: 30\n",
        expected={"name": "John", "age": "30"},
        round_trips=True,
    ),
    DocumentCase(
        name="nested_schemas",
        source=_dedent(
            """
            items[1]{users,status}:
              users[2]{id,name}:
                1,Ada
                2,Bob
              status: active
            """
        ),
        expected={
            "items": [
                {
                    "users": [{"id": "1", "name": "Ada"}, {"id": "2", "name": "Bob"}],
                    "status": "active",
                }
            ]
        },
        round_trips=True,
    ),
    DocumentCase(
        name="schema_without_size",
        source=_dedent(
            """
            config{host,port}:
              localhost,8080
            """
        ),
        expected={"config": [{"host": "localhost", "port": "8080"}]},
        round_trips=True,
    ),
    DocumentCase(
        name="multiple_data_rows",
        source=_dedent(
            """
            products[3]{id,name,price}:
              1,Widget,100
              2,Gadget,200
              3,Gizmo,300
            """
        ),
        expected={
            "products": [
                {"id": "1", "name": "Widget", "price": "100"},
                {"id": "2", "name": "Gadget", "price": "200"},
                {"id": "3", "name": "Gizmo", "price": "300"},
            ]
        },
        round_trips=True,
    ),
    DocumentCase(
        name="deeply_nested_structure",
        source=_dedent(
            """
            org[1]{depts}:
              depts[2]{name,employees}:
                eng,5
                sales,3
            """
        ),
        expected={"org": [{"depts": [{"name": "eng", "employees": "5"}, {"name": "sales", "employees": "3"}]}]},
        round_trips=True,
    ),
    DocumentCase(
        name="single_field_schema",
        source=_dedent(
            """
            tags[3]{name}:
              ruby
              rails
              programming
            """
        ),
        expected={"tags": [{"name": "ruby"}, {"name": "rails"}, {"name": "programming"}]},
        round_trips=True,
    ),
    DocumentCase(
        name="empty_lines_ignored",
        source="users[2]{id,name}:\n  1,Ada\n\n  2,Bob\n",
        expected={"users": [{"id": "1", "name": "Ada"}, {"id": "2", "name": "Bob"}]},
    ),
    DocumentCase(
        name="complex_real_world_example",
        source=_dedent(
            """
            database[1]{tables,version}:
              tables[2]{name,columns}:
                users,4
                posts,6
              version: 2
            """
        ),
        expected={
            "database": [
                {
                    "tables": [{"name": "users", "columns": "4"}, {"name": "posts", "columns": "6"}],
                    "version": "2",
                }
            ]
        },
        round_trips=True,
    ),
    DocumentCase(
        name="nested_block_and_inline_list",
        source=_dedent(
            """
            server:
              host: example.com
              ports: 80,443
              tls:
                enabled: yes
            """
        ),
        expected={
            "server": {
                "host": "example.com",
                "ports": ["80", "443"],
                "tls": {"enabled": "yes"},
            }
        },
    ),
    DocumentCase(
        name="quoted_values_and_keys",
        source='title: "Hello, world"\n"odd key": "tab\\there"\n',
        expected={"title": "Hello, world", "odd key": "tab\there"},
    ),
    DocumentCase(
        name="empty_document",
        source="",
        expected={},
        round_trips=True,
    ),
)


def case_id(case: DocumentCase) -> str:
    return case.name
