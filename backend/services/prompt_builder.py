"""All prompt templates for Gemini API calls."""

import re

_WS_RE = re.compile(r"\s+")


def _clean(value) -> str:
    """Collapse whitespace; ``None`` becomes an empty string."""
    return _WS_RE.sub(" ", str(value or "")).strip()


# --- Interview prep ---

def build_interview_prompt(role: str, experience: str, topics: str, count: int) -> str:
    return f"""You are an AI trained to generate technical interview questions and answers.

Task:
- Role: {role}
- Candidate Experience: {experience} years
- Focus Topics: {topics}
- Write {count} interview questions.
- For each question, generate a detailed but beginner-friendly answer.
- If the answer needs a code example, add a small code block inside.
- Keep formatting very clean.
- Return a pure JSON array like:
[
    {{
        "question": "Question here?",
        "answer": "Answer here."
    }}
]
Important: Do NOT add any extra text. Only return valid JSON."""


def build_concept_prompt(question: str) -> str:
    return f"""You are an AI trained to generate explanations for a given interview question.

Task:
- Explain the following interview question and its concept in depth as if you're teaching a beginner developer.
- Question: "{question}"
- After the explanation, provide a short and clear title that summarizes the concept for the article or page header.
- If the explanation includes a code example, provide a small code block.
- Keep the formatting very clean and clear.
- Return the result as a valid JSON object in the following format:

{{
    "title": "Short title here?",
    "explanation": "Explanation here."
}}

Important: Do NOT add any extra text outside the JSON format. Only return valid JSON."""


# --- ATS scoring ---

ATS_STRICT_JSON_SUFFIX = (
    "\n\nYour previous answer could not be parsed. Return the same ATS analysis "
    "as a raw JSON object only, with no explanation or markdown fences."
)


def build_ats_prompt(resume_text: str, role: str = "", experience: str = "", job_description: str = "") -> str:
    """ATS scoring prompt. Works resume-only or with role/JD context."""
    return f"""You are an expert ATS (Applicant Tracking System) evaluator focused on India's 2025 job market.
Return ONLY a valid JSON object in the exact structure specified below. No markdown fences, no extra text, no trailing commas.

Operate in two modes:
- Mode A (Resume-only): if Target Role and Job Description are "N/A" or empty, score against India-2025 market demand for the resume's apparent domain and experience level.
- Mode B (Resume+Context): if Target Role and/or Job Description are present, score and recommend primarily by JD-critical alignment for that role.

Strict output contract (integers 0-100 for all scores):
{{
  "overallScore": 87,
  "sectionScores": {{
    "Experience": 85,
    "Skills": 78,
    "Education": 90,
    "Projects": 70,
    "Formatting": 80
  }},
  "summary": "One paragraph summary of strengths and weaknesses.",
  "keywordAnalysis": {{
    "present": ["React", "Node.js", "MongoDB"],
    "missing": ["AWS", "Docker", "Kubernetes"]
  }},
  "recommendations": [
    {{
      "issue": "No quantified achievements",
      "exampleFix": "Led a team of 3 developers and increased application performance by 40%"
    }}
  ]
}}

Scoring rules:
- If years of experience <= 1 (fresher): weights Experience 20, Skills 30, Education 15, Projects 25, Formatting 10
- Else (experienced): weights Experience 30, Skills 30, Education 10, Projects 15, Formatting 15
- overallScore = weighted sum of sectionScores, rounded to nearest integer.
- Penalize: vague bullets (no numbers/outcomes), missing dates/titles, non-standard headings, tables/columns/graphics, keyword stuffing, inconsistent tense, dense formatting.
- Reward: quantified impact (%, time/cost, scale), recent/relevant projects, clear role scope, standard headings, single-column, simple bullets.

Keyword intelligence:
- Normalize synonyms/near-matches (React.js = React, K8s = Kubernetes, Postgres = PostgreSQL, Pipelines = CI/CD).
- keywordAnalysis.present: normalized, deduped key terms present (at most 25).
- keywordAnalysis.missing: the most JD-critical or market-critical gaps (at most 20), prioritized by impact.

Recommendations:
- Provide 5-8 prioritized items, each with a short role/JD-aware "issue" and a concrete, quantified one-line "exampleFix".
- If formatting hurts ATS parsing, include an explicit formatting fix.

Guardrails:
- Output EXACT JSON structure (no added/removed fields).
- "summary": 3-5 crisp sentences covering strengths, key gaps and top next steps.
- Do not invent employers, dates, or credentials.

Context (treat "N/A"/empty as absent):
- Target Role: {role or "N/A"}
- Years of Experience: {experience or "N/A"}
- Job Description: {job_description or "N/A"}

Resume Content:
{resume_text}
"""


# --- Coding practice ---

_QUESTION_KEYS = """- statement: detailed problem description
- constraints: array of constraint strings (keep short)
- examples: array of {input, output, explanation} (2-3 examples)
- solutionExplanation: brief explanation of approach
- difficulty: one of "Easy", "Medium", "Hard"
- solutions: object with short code snippets for {python, cpp, c, java}
- inputFormat: "single_line", "multi_line", "array", or "matrix"
- outputFormat: "single_value", "array", or "matrix"
- dataTypes: {input: ["type1"], output: "outputType"}"""

_IO_FORMAT_RULES = """INPUT/OUTPUT FORMAT RULES:
1. ALL inputs must use space-separated format, NOT JSON arrays
2. For arrays: use "1 2 3 4 5" NOT "[1, 2, 3, 4, 5]"
3. For multiple lines: use "\\n" to separate lines
4. For empty arrays: use "" as input, "0" or appropriate default as output
5. For null results: use "null" (string) as expected output
6. All inputs must be parseable by standard stdin reading (input(), scanf, cin, etc.)"""


def build_coding_prompt(topics: str, experience: str, difficulty: str, count: int) -> str:
    return f"""You are a coding interview generator. Generate {count} unique {difficulty} coding interview problems focusing on these topics: {topics}, suitable for a candidate with {experience} years of experience.

Each problem MUST be returned as valid JSON with these keys only:
{_QUESTION_KEYS}

{_IO_FORMAT_RULES}

Keep examples simple and solutions concise. Focus on algorithmic thinking rather than implementation details.

Return ONLY a pure JSON array of problems. Do not add markdown fences, commentary, or extra text."""


def build_more_coding_prompt(
    topics: list[str],
    experience: str,
    difficulty: str,
    count: int,
    existing_statements: list[str] | None = None,
) -> str:
    """Ask for exactly ``count`` more problems, avoiding ones already in the session."""
    existing = ", ".join(f'"{str(s)[:60]}..."' for s in existing_statements or [])
    return f"""You are a coding interview generator. Generate exactly {count} coding interview problems focusing on these topics: {", ".join(topics)} with {difficulty} difficulty for someone with {experience} years of experience.

CRITICAL RULES:
- Generate EXACTLY {count} problems, no more, no less.
- Output MUST be a pure JSON array of exactly {count} objects.
- Do NOT include markdown, backticks, or any text outside the JSON.
- Do not generate any problems that have a statement matching any of the following statements: {existing or "none"}

Each question object MUST include:
{_QUESTION_KEYS}

{_IO_FORMAT_RULES}"""


def build_solution_prompt(language: str, statement: str, constraints: list[str], examples: list[dict]) -> str:
    examples_text = "\n".join(
        f"Input: {ex.get('input', '')}\nOutput: {ex.get('output', '')}" for ex in examples
    )
    return f"""Generate a complete, production-ready solution for this coding problem in {language}:

Problem: {statement}

Constraints: {", ".join(constraints) or "None"}

Examples: {examples_text or "None"}

CRITICAL REQUIREMENTS:
1. The code MUST read input dynamically from stdin (not hardcoded values)
2. The code MUST handle the exact input format from the examples
3. The code MUST produce output that matches expected output exactly
4. Include proper input parsing for the language
5. Provide a detailed explanation with sections: Problem description, Algorithm, Code implementation, Time and Space Complexity. Use HTML <strong> tags for headings and a single bullet symbol '•' for list items: <strong>Heading 1</strong><br>• Point 1<br>• Point 2
6. Include accurate time and space complexity analysis

Language-specific input handling:
- Python: use input() or sys.stdin.read()
- Java: use Scanner(System.in) or BufferedReader
- C++: use cin or getline
- C: use scanf/fgets

Return as JSON with keys: code, explanation, timeComplexity, spaceComplexity"""


# --- Email templates ---

TEMPLATE_TYPES = ("cold", "referral", "followup")

_EMAIL_CONSTRAINTS = """- Produce an email that feels human and personable while remaining concise and professional.
- Use an authentic voice (avoid AI cliches like "as an AI" or "I'm excited to apply for the role at your esteemed organization").
- Prefer specific, concrete phrasing over generic fluff; include 1-2 tailored, high-impact lines derived from context.
- Keep paragraphs short (2-3 lines) and scannable.
- Provide one alternate subject line variant on the next line prefixed by "Alt:" for A/B testing.
- Do not insert placeholders the user didn't provide; infer naturally from available details."""


def _email_context(target_role: str, yoe: str, jd: str, resume_highlights: str) -> str:
    return f"""Context:
- Target Role: {_clean(target_role)}
- Years of Experience (YOE): {_clean(yoe)}
- JD Details (key points): {_clean(jd)}
- Resume Highlights (key points): {_clean(resume_highlights)}"""


def build_email_prompt(
    template_type: str,
    target_role: str,
    yoe: str,
    jd: str = "",
    resume_highlights: str = "",
) -> str:
    """Email prompt by type: cold | referral | followup. Unknown types get the cold prompt."""
    kind = _clean(template_type).lower() or "cold"
    role = _clean(target_role)
    years = _clean(yoe)

    if kind == "referral":
        task = (
            f'Write a polite referral request for the role "{role}", mentioning {years} years of '
            "experience and 1-2 reasons of fit tied to JD or accomplishments. Keep it respectful "
            "and low-friction to respond."
        )
        output = (
            "Subject: <clear subject line for referral ask>\n"
            "Email:\n<brief body that respects their time, adds credibility, and includes an easy call-to-action>"
        )
    elif kind == "followup":
        task = (
            f'Write a concise follow-up email regarding the role "{role}" for a candidate with {years} '
            "years of experience. Be polite, reaffirm fit with one concrete point, and suggest a next step."
        )
        output = (
            "Subject: <polite follow-up subject>\n\n"
            "Email:\n<short, appreciative body that nudges a decision without pressure>"
        )
        jd, resume_highlights = "", ""
    else:
        task = (
            f'Write a persuasive cold email to a recruiter for the role "{role}", highlighting {years} '
            "years of experience and briefly aligning with the JD and relevant achievements."
        )
        output = (
            "Subject: <compelling subject line>\n"
            "Email:\n<short, confident body with a concrete value hook, 1-2 specific ties to JD, and a clear next step>"
        )

    return f"""{task}

{_email_context(target_role, yoe, jd, resume_highlights)}

{_EMAIL_CONSTRAINTS}

Output format:
{output}"""
