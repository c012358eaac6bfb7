"""Tests for framework import detection and alias resolution."""

from __future__ import annotations

import pytest

from hookify.analyzer.imports import (
    ImportBinding,
    collect_bindings,
    find_framework_imports,
    find_module,
    framework_is_imported,
    module_is_imported,
    resolve_alias_for,
    resolve_namespace,
)
from hookify.tree import parse_source


class TestModuleIsImported:
    def test_single_import(self):
        tree = parse_source('import React from "react";\n')
        assert module_is_imported(tree, "react")
        assert find_module(tree, "react").size() == 1

    def test_side_effect_import_counts(self):
        tree = parse_source("import 'react';\n")
        assert module_is_imported(tree, "react")

    def test_duplicate_import_is_ambiguous(self):
        tree = parse_source(
            'import React from "react";\n'
            'import { Component } from "react";\n'
        )
        assert find_module(tree, "react").size() == 2
        assert not module_is_imported(tree, "react")

    def test_other_module(self):
        tree = parse_source('import React from "preact";\n')
        assert not module_is_imported(tree, "react")

    def test_exact_spelling_only(self):
        tree = parse_source('import React from "react-dom";\n')
        assert not module_is_imported(tree, "react")


class TestFrameworkIsImported:
    @pytest.mark.parametrize("spelling", ["React", "react", "react-native"])
    def test_every_accepted_spelling(self, spelling):
        tree = parse_source(f'import React from "{spelling}";\n')
        assert framework_is_imported(tree)

    def test_same_text_outside_an_import(self):
        tree = parse_source('const name = "react";\nrequire("react");\n')
        assert not framework_is_imported(tree)

    def test_reexport_is_not_an_import(self):
        tree = parse_source('export { Component } from "react";\n')
        assert not framework_is_imported(tree)

    def test_no_imports(self):
        assert not framework_is_imported(parse_source("const x = 1;\n"))

    def test_custom_spellings(self):
        tree = parse_source('import React from "preact/compat";\n')
        assert framework_is_imported(tree, ["preact/compat"])
        assert not framework_is_imported(tree)

    def test_framework_imports_empty_when_not_imported(self):
        tree = parse_source('import { Component } from "preact";\n')
        assert find_framework_imports(tree).size() == 0

    def test_framework_imports_skip_spelling_imported_twice(self):
        tree = parse_source(
            'import React from "react";\n'
            'import { Component as X } from "react";\n'
            'import { View } from "react-native";\n'
        )
        imports = find_framework_imports(tree)
        assert imports.size() == 1
        assert "react-native" in imports.first().text.decode()
        assert resolve_alias_for(tree, "Component") is None


class TestResolveAlias:
    def test_named_import(self):
        tree = parse_source('import React, { Component } from "react";\n')
        assert resolve_alias_for(tree, "Component") == "Component"

    def test_renamed_import(self):
        tree = parse_source('import { Component as Base } from "react";\n')
        assert resolve_alias_for(tree, "Component") == "Base"

    def test_absent_when_only_default_import(self):
        tree = parse_source('import React from "react";\n')
        assert resolve_alias_for(tree, "Component") is None

    def test_absent_for_other_export(self):
        tree = parse_source('import { PureComponent } from "react";\n')
        assert resolve_alias_for(tree, "Component") is None
        assert resolve_alias_for(tree, "PureComponent") == "PureComponent"

    def test_ignores_non_framework_modules(self):
        tree = parse_source(
            'import React from "react";\n'
            'import { Component as Base } from "./base";\n'
        )
        assert resolve_alias_for(tree, "Component") is None

    def test_absent_without_framework(self):
        tree = parse_source('import { Component } from "preact";\n')
        assert resolve_alias_for(tree, "Component") is None


class TestResolveNamespace:
    def test_default_import(self):
        tree = parse_source('import R from "react";\n')
        assert resolve_namespace(tree) == "R"

    def test_namespace_import(self):
        tree = parse_source('import * as Re from "react";\n')
        assert resolve_namespace(tree) == "Re"

    def test_fallback(self):
        tree = parse_source('import { Component } from "react";\n')
        assert resolve_namespace(tree) == "React"
        assert resolve_namespace(tree, fallback="Preact") == "Preact"


class TestCollectBindings:
    def test_all_import_forms(self):
        tree = parse_source(
            'import React, { Component as Base, useState } from "react";\n'
            'import * as utils from "./utils";\n'
        )
        table = collect_bindings(tree)
        assert table == {
            "React": ImportBinding("React", "react", "default"),
            "Base": ImportBinding("Base", "react", "Component"),
            "useState": ImportBinding("useState", "react", "useState"),
            "utils": ImportBinding("utils", "./utils", "*"),
        }

    def test_later_import_wins(self):
        tree = parse_source(
            'import a from "x";\n'
            'import { a } from "y";\n'
        )
        assert collect_bindings(tree)["a"] == ImportBinding("a", "y", "a")

    def test_side_effect_import_binds_nothing(self):
        assert collect_bindings(parse_source('import "./styles.css";\n')) == {}
