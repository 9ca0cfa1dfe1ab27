import pytest

from services.solution_templates import SUPPORTED_LANGUAGES, generate_solution_template


class TestSolutionTemplates:
    @pytest.mark.parametrize("language", SUPPORTED_LANGUAGES)
    def test_every_language_has_placeholder(self, language):
        template = generate_solution_template(language, "maxSum", ["array<integer>"], "integer")
        assert "Write your solution here" in template
        assert "maxSum" in template

    def test_python_array_input(self):
        template = generate_solution_template("python", "solve", ["array<integer>"], "array<integer>")
        assert "def solve(nums):" in template
        assert "list(map(int, line.split()))" in template
        assert "' '.join(map(str, result))" in template

    def test_python_prints_null(self):
        template = generate_solution_template("python", "solve", ["integer"], "integer")
        assert "def solve(n):" in template
        assert "'null'" in template

    def test_python_multi_line(self):
        template = generate_solution_template("python", "solve", ["integer"], "integer", "multi_line")
        assert "def solve(lines):" in template

    def test_cpp_string_input(self):
        template = generate_solution_template("cpp", "rev", ["string"], "string")
        assert "string rev(string s)" in template
        assert "getline(cin, s);" in template

    def test_java_array_output(self):
        template = generate_solution_template("java", "sortIt", ["array<integer>"], "array<integer>")
        assert "public int[] sortIt(int[] nums)" in template
        assert "public class Solution" in template

    def test_unknown_language_falls_back_to_python(self):
        assert generate_solution_template("cobol", "f") == generate_solution_template("python", "f")

    def test_default_input_types(self):
        assert "def solution(n):" in generate_solution_template("PYTHON")
