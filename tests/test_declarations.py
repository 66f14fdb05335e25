"""Tests for unused variable / function detection."""

import pytest

from cleanslate.issues import IssueKind

UNUSED_KINDS = (IssueKind.UNUSED_VARIABLE, IssueKind.UNUSED_FUNCTION)


def _unused(issues):
    return [issue for issue in issues if issue.kind in UNUSED_KINDS]


class TestUnusedVariables:

    def test_unreferenced_variable_is_reported(self, scan):
        issues = _unused(scan('const unusedVariable = "x";\n'))

        assert len(issues) == 1
        assert issues[0].kind is IssueKind.UNUSED_VARIABLE
        assert issues[0].line == 1
        assert issues[0].message == "Unused variable 'unusedVariable'"

    def test_later_use_suppresses_issue(self, scan):
        source = 'const usedVariable = "x";\n\nconsole.log(usedVariable);\n'
        assert _unused(scan(source)) == []

    def test_use_before_declaration_counts(self, scan):
        source = "function show() {\n  return late;\n}\nshow();\nvar late = 1;\n"
        assert _unused(scan(source)) == []

    def test_var_and_let_are_tracked(self, scan):
        issues = _unused(scan("var a = 1;\nlet b;\n"))
        assert [(issue.message, issue.line) for issue in issues] == [
            ("Unused variable 'a'", 1),
            ("Unused variable 'b'", 2),
        ]

    def test_redeclaration_keeps_last_line(self, scan):
        issues = _unused(scan("var a = 1;\nvar a = 2;\n"))
        assert [issue.line for issue in issues] == [2]

    def test_destructured_bindings_are_not_tracked(self, scan):
        assert _unused(scan("const { a, b } = load();\nconst [c] = list;\n")) == []

    def test_host_names_are_excluded(self, scan):
        source = "var exports = {};\nvar module = {};\nvar require = null;\n"
        assert _unused(scan(source)) == []

    def test_parameter_is_not_a_use(self, scan):
        source = "const value = 1;\nfunction show(value) {\n  return 0;\n}\nshow();\n"
        issues = _unused(scan(source))
        assert [(issue.message, issue.line) for issue in issues] == [
            ("Unused variable 'value'", 1),
        ]

    def test_shorthand_property_is_a_use(self, scan):
        source = "const handler = 1;\nmodule.exports = { handler };\n"
        assert _unused(scan(source)) == []

    def test_member_property_is_not_a_use(self, scan):
        source = "const size = 1;\nconsole.log(box.size);\n"
        issues = _unused(scan(source))
        assert [issue.message for issue in issues] == ["Unused variable 'size'"]

    def test_nested_declarations_share_one_table(self, scan):
        source = (
            "function outer() {\n"
            "  const inner = 1;\n"
            "  return 0;\n"
            "}\n"
            "outer();\n"
        )
        issues = _unused(scan(source))
        assert [(issue.message, issue.line) for issue in issues] == [
            ("Unused variable 'inner'", 2),
        ]


class TestUnusedFunctions:

    def test_uncalled_function_is_reported(self, scan):
        source = "function unusedFunction() {\n  console.log('never');\n}\n"
        issues = _unused(scan(source))

        assert len(issues) == 1
        assert issues[0].kind is IssueKind.UNUSED_FUNCTION
        assert issues[0].line == 1
        assert issues[0].message == "Unused function 'unusedFunction'"
        assert issues[0].snippet == "function unusedFunction() {"

    def test_called_function_is_used(self, scan):
        assert _unused(scan("function run() {}\nrun();\n")) == []

    def test_function_passed_as_value_is_used(self, scan):
        assert _unused(scan("function onClick() {}\nbutton.on('click', onClick);\n")) == []

    def test_function_expression_name_is_not_a_declaration(self, scan):
        source = "const run = function inner() {};\nrun();\n"
        assert _unused(scan(source)) == []


class TestBindingPositions:

    def test_unused_for_of_variable_is_reported(self, scan):
        issues = _unused(scan("for (const item of items) {\n  go();\n}\n"))
        assert [(issue.message, issue.line) for issue in issues] == [
            ("Unused variable 'item'", 1),
        ]

    def test_unused_for_in_variable_is_reported(self, scan):
        issues = _unused(scan("for (let key in table) {\n  go();\n}\n"))
        assert [issue.message for issue in issues] == ["Unused variable 'key'"]

    def test_used_loop_variable(self, scan):
        assert _unused(scan("for (var item of items) {\n  show(item);\n}\n")) == []

    def test_loop_variable_is_not_a_use_of_outer_name(self, scan):
        source = "const item = 1;\nfor (const item of items) {\n  go();\n}\n"
        issues = _unused(scan(source))
        assert [(issue.message, issue.line) for issue in issues] == [
            ("Unused variable 'item'", 2),
        ]

    @pytest.mark.parametrize("params", ["value = 1", "...value", "first, value = first"])
    def test_default_and_rest_parameters_are_not_uses(self, scan, params):
        source = f"const value = 1;\nfunction show({params}) {{\n  return 0;\n}}\nshow();\n"
        issues = _unused(scan(source))
        assert [(issue.message, issue.line) for issue in issues] == [
            ("Unused variable 'value'", 1),
        ]

    def test_default_value_is_a_use(self, scan):
        source = "const fallback = 1;\nfunction show(value = fallback) {\n  return value;\n}\nshow();\n"
        assert _unused(scan(source)) == []


class TestExports:

    def test_exported_declarations_are_not_reported(self, scan):
        source = "export function api() {}\nexport const VERSION = 1;\n"
        assert _unused(scan(source)) == []

    def test_default_export_function(self, scan):
        assert _unused(scan("export default function main() {}\n")) == []

    def test_private_declarations_in_module_are_reported(self, scan):
        source = "function helper() {}\nexport const VERSION = 1;\n"
        issues = _unused(scan(source))
        assert [issue.message for issue in issues] == ["Unused function 'helper'"]
