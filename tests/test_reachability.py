"""Tests for unreachable statements after return."""

from cleanslate.issues import IssueKind


def _unreachable(issues):
    return [issue for issue in issues if issue.kind is IssueKind.UNREACHABLE_CODE]


class TestUnreachableCode:

    def test_only_first_statement_after_return_is_reported(self, scan):
        source = (
            "function f(x) {\n"
            "  return x;\n"
            "  a();\n"
            "  b();\n"
            "}\n"
            "f(1);\n"
        )
        issues = _unreachable(scan(source))

        assert len(issues) == 1
        assert issues[0].line == 3
        assert issues[0].snippet == "  a();"
        assert issues[0].message == "Unreachable code after return statement at line 2"

    def test_return_inside_conditional_does_not_hide_following_code(self, scan):
        source = (
            "function g(x) {\n"
            "  if (x) {\n"
            "    return 1;\n"
            "  }\n"
            "  return 2;\n"
            "}\n"
            "g(1);\n"
        )
        assert _unreachable(scan(source)) == []

    def test_nested_block_is_checked_on_its_own(self, scan):
        source = (
            "function g(x) {\n"
            "  if (x) {\n"
            "    return 1;\n"
            "    log(x);\n"
            "  }\n"
            "  return 2;\n"
            "  cleanup();\n"
            "}\n"
            "g(1);\n"
        )
        issues = _unreachable(scan(source))
        assert sorted(issue.line for issue in issues) == [4, 7]

    def test_return_as_last_statement_is_fine(self, scan):
        assert _unreachable(scan("function h() {\n  go();\n  return 1;\n}\nh();\n")) == []

    def test_single_statement_block(self, scan):
        assert _unreachable(scan("function h() { return 1; }\nh();\n")) == []

    def test_throw_and_break_are_not_considered(self, scan):
        source = (
            "function k(items) {\n"
            "  for (const item of items) {\n"
            "    break;\n"
            "    use(item);\n"
            "  }\n"
            "  throw new Error('x');\n"
            "  done();\n"
            "}\n"
            "k([]);\n"
        )
        assert _unreachable(scan(source)) == []

    def test_comment_after_return_is_not_a_statement(self, scan):
        source = "function h() {\n  return 1;\n  // trailing note\n}\nh();\n"
        assert _unreachable(scan(source)) == []
