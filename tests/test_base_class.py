"""Tests for locating classes that extend the framework's base component."""

from __future__ import annotations

from hookify.analyzer.base_class import (
    find_class_declarations,
    find_component_classes,
    find_component_classes_by_parent,
    has_component_class,
    located_parent,
    superclass_of,
)
from hookify.analyzer.predicates import get_class_name
from hookify.tree import Collection, parse_source
from hookify.tree.nodes import node_text


def class_names(coll: Collection) -> list[str | None]:
    return [get_class_name(n) for n in coll]


QUALIFIED = '''
import React from "react";

class A extends React.Component {
  render() { return null; }
}
'''

RENAMED = '''
import { Component as Foo } from "react";

class A extends Foo {
  render() { return null; }
}
'''


class TestClassDeclarations:
    def test_declarations_and_default_exported_anonymous_class(self):
        tree = parse_source(
            "class A {}\n"
            "const B = class {};\n"
            "export default class extends C {}\n"
        )
        found = find_class_declarations(tree)
        assert [n.type for n in found] == ["class_declaration", "class"]
        assert class_names(found) == ["A", None]

    def test_superclass_of(self):
        tree = parse_source("class A extends React.Component {}\nclass B {}\n")
        a, b = find_class_declarations(tree)
        assert node_text(superclass_of(a)) == "React.Component"
        assert superclass_of(b) is None


class TestFindComponentClasses:
    def test_qualified_form(self):
        assert class_names(find_component_classes(parse_source(QUALIFIED))) == ["A"]

    def test_named_import(self):
        tree = parse_source(
            'import React, { Component } from "react";\n'
            "class A extends Component {}\n"
        )
        assert class_names(find_component_classes(tree)) == ["A"]

    def test_alias_transparency(self):
        qualified = find_component_classes(parse_source(QUALIFIED))
        renamed = find_component_classes(parse_source(RENAMED))
        assert class_names(qualified) == class_names(renamed) == ["A"]

    def test_pure_component_qualified(self):
        tree = parse_source(
            'import React from "react";\n'
            "class Greeter extends React.PureComponent {}\n"
        )
        assert class_names(find_component_classes(tree)) == ["Greeter"]

    def test_pure_component_named(self):
        tree = parse_source(
            'import React, { PureComponent } from "react";\n'
            "class A extends PureComponent {}\n"
        )
        assert class_names(find_component_classes(tree)) == ["A"]

    def test_default_import_under_another_name(self):
        tree = parse_source(
            'import R from "react";\n'
            "class A extends R.Component {}\n"
            "class B extends React.Component {}\n"
        )
        assert class_names(find_component_classes(tree)) == ["A"]

    def test_no_framework_import_returns_empty(self):
        tree = parse_source("class A extends React.Component {}\n")
        assert find_component_classes(tree).size() == 0
        assert not has_component_class(tree)

    def test_framework_imported_twice_returns_empty(self):
        tree = parse_source(
            'import React from "react";\n'
            'import { Component } from "react";\n'
            "class A extends Component {}\n"
        )
        assert find_component_classes(tree).size() == 0

    def test_spelling_imported_twice_is_ignored_beside_clean_spelling(self):
        tree = parse_source(
            'import React from "react";\n'
            'import { Component as X } from "react";\n'
            'import { View } from "react-native";\n'
            "class A extends X {}\n"
        )
        assert find_component_classes(tree).size() == 0

    def test_alias_is_authoritative(self):
        tree = parse_source(
            'import React, { Component as Base } from "react";\n'
            "class A extends Base {}\n"
            "class B extends React.Component {}\n"
        )
        assert class_names(find_component_classes(tree)) == ["A"]

    def test_unrelated_superclass(self):
        tree = parse_source(
            'import React from "react";\n'
            "class A extends Something {}\n"
            "class B extends React.Fragment {}\n"
            "class C {}\n"
        )
        assert find_component_classes(tree).size() == 0

    def test_anonymous_default_export(self):
        tree = parse_source(
            'import React from "react";\n'
            "export default class extends React.Component {\n"
            "  render() { return null; }\n"
            "}\n"
        )
        found = find_component_classes(tree)
        assert found.size() == 1
        assert get_class_name(found.first()) is None

    def test_class_expression_in_variable_is_not_a_declaration(self):
        tree = parse_source(
            'import React from "react";\n'
            "const A = class extends React.Component {};\n"
        )
        assert find_component_classes(tree).size() == 0


class TestTiers:
    MIXED = (
        'import React, { Component, PureComponent } from "react";\n'
        "class A extends Component {}\n"
        "class B extends PureComponent {}\n"
    )

    def test_first_non_empty_tier_wins(self):
        tree = parse_source(self.MIXED)
        assert class_names(find_component_classes(tree)) == ["A"]

    def test_union_of_tiers(self):
        tree = parse_source(self.MIXED)
        assert class_names(find_component_classes(tree, union=True)) == ["A", "B"]

    def test_by_parent(self):
        tree = parse_source(self.MIXED)
        assert class_names(find_component_classes_by_parent(tree, "PureComponent")) == ["B"]

    def test_located_parent(self):
        tree = parse_source(self.MIXED)
        a, b = find_class_declarations(tree)
        assert located_parent(tree, a) == "Component"
        assert located_parent(tree, b) == "PureComponent"

    def test_has_component_class(self):
        assert has_component_class(parse_source(self.MIXED))
