"""Tests for wren.codegen.alias: deterministic import aliases."""

import hashlib
import re

import pytest

from wren.codegen.alias import ImportBinding, ImportTable, create_alias

_ALIAS_RE = re.compile(r"^get_[0-9a-f]{16}$")


class TestCreateAlias:
    def test_shape(self) -> None:
        assert _ALIAS_RE.match(create_alias("./app/route", "get"))

    def test_digest_of_path_and_name(self) -> None:
        expected = hashlib.sha256(b"./app/route::get").hexdigest()[:16]
        assert create_alias("./app/route", "get") == f"get_{expected}"

    def test_deterministic(self) -> None:
        aliases = {create_alias("./app/users/_id/route", "get") for _ in range(5)}
        assert len(aliases) == 1

    @pytest.mark.parametrize(
        ("left", "right"),
        [
            (("./app/route", "get"), ("./app/route", "post")),
            (("./app/route", "get"), ("./app/Route", "get")),
            (("./app/route", "get"), (".\\app\\route", "get")),
            (("./app/a/route", "get"), ("./app/b/route", "get")),
        ],
    )
    def test_sensitive_to_every_character(
        self, left: tuple[str, str], right: tuple[str, str]
    ) -> None:
        assert create_alias(*left) != create_alias(*right)

    def test_distinct_across_many_routes(self) -> None:
        aliases = {create_alias(f"./app/r{i}/route", "get") for i in range(2000)}
        assert len(aliases) == 2000


class TestImportBinding:
    def test_statement(self) -> None:
        binding = ImportBinding(
            name="get",
            path="./app/route",
            module=".app.route",
            alias="get_0123456789abcdef",
        )
        assert binding.statement == "from .app.route import get as get_0123456789abcdef"


class TestImportTable:
    def test_request_creates_binding(self) -> None:
        table = ImportTable()
        binding = table.request("./app/route", ".app.route", "get")
        assert binding.alias == create_alias("./app/route", "get")
        assert binding.count == 1
        assert len(table) == 1
        assert ("./app/route", "get") in table

    def test_repeated_request_reuses_binding(self) -> None:
        table = ImportTable()
        first = table.request("./app/route", ".app.route", "get")
        second = table.request("./app/route", ".app.route", "get")
        assert second is first
        assert first.count == 2
        assert len(table) == 1

    def test_bindings_sorted_numeric_aware(self) -> None:
        table = ImportTable()
        table.request("./app/page10/route", ".app.page10.route", "get")
        table.request("./app/page2/route", ".app.page2.route", "post")
        table.request("./app/page2/route", ".app.page2.route", "get")
        paths = [(b.path, b.name) for b in table.bindings()]
        assert paths[0][0] == "./app/page2/route"
        assert paths[-1] == ("./app/page10/route", "get")

    def test_tables_are_independent(self) -> None:
        one = ImportTable()
        two = ImportTable()
        one.request("./app/route", ".app.route", "get")
        assert len(two) == 0
