from services import prompt_builder


class TestPromptBuilder:
    def test_ats_prompt_defaults_to_na(self):
        prompt = prompt_builder.build_ats_prompt("resume body")
        assert "- Target Role: N/A" in prompt
        assert "- Job Description: N/A" in prompt
        assert prompt.rstrip().endswith("resume body")

    def test_ats_prompt_with_context(self):
        prompt = prompt_builder.build_ats_prompt("resume", role="SRE", experience="4", job_description="On-call")
        assert "- Target Role: SRE" in prompt
        assert "- Years of Experience: 4" in prompt
        assert "- Job Description: On-call" in prompt

    def test_coding_prompt(self):
        prompt = prompt_builder.build_coding_prompt("trees", "3", "Medium", 4)
        assert "Generate 4 unique Medium coding interview problems" in prompt
        assert "trees" in prompt
        assert "space-separated" in prompt

    def test_more_prompt_truncates_existing(self):
        long_statement = "x" * 100
        prompt = prompt_builder.build_more_coding_prompt(["dp"], "2", "Easy", 2, [long_statement])
        assert f'"{"x" * 60}..."' in prompt
        assert "x" * 61 not in prompt
        assert "EXACTLY 2 problems" in prompt

    def test_more_prompt_without_existing(self):
        prompt = prompt_builder.build_more_coding_prompt(["dp"], "2", "Easy", 2)
        assert "following statements: none" in prompt

    def test_solution_prompt(self):
        prompt = prompt_builder.build_solution_prompt(
            "java", "Sum it", ["n <= 10"], [{"input": "1 2", "output": "3"}]
        )
        assert "in java" in prompt
        assert "Constraints: n <= 10" in prompt
        assert "Input: 1 2\nOutput: 3" in prompt

    def test_solution_prompt_without_examples(self):
        prompt = prompt_builder.build_solution_prompt("c", "Sum it", [], [])
        assert "Constraints: None" in prompt
        assert "Examples: None" in prompt

    def test_concept_prompt_quotes_question(self):
        assert '"What is CAP?"' in prompt_builder.build_concept_prompt("What is CAP?")

    def test_email_prompt_by_type(self):
        cold = prompt_builder.build_email_prompt("cold", "SDE", "2", jd="Go  services\n")
        referral = prompt_builder.build_email_prompt("referral", "SDE", "2")
        assert "persuasive cold email" in cold
        assert "- JD Details (key points): Go services" in cold
        assert "referral request" in referral

    def test_unknown_email_type_uses_cold(self):
        assert prompt_builder.build_email_prompt("party", "SDE", "2") == prompt_builder.build_email_prompt(
            "cold", "SDE", "2"
        )
