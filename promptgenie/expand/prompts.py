# Template expansion: user intent + parameter set -> instruction for the model.
# Pure string work; the user's prompt is embedded verbatim.

from .types import PromptParameters

EXAMPLES_COUNT = {
    "none": 0,
    "few": 2,
    "many": 4,
}

FORMAT_LENGTH = {
    "concise": "Keep the response brief and to the point",
    "detailed": "Provide a balanced level of detail",
    "comprehensive": "Include extensive details and explanations",
}

CONSTRAINT_LEVEL = {
    "minimal": "with basic safety guidelines",
    "moderate": "with clear boundaries and moderate restrictions",
    "strict": "with strict limitations and comprehensive safety measures",
}

STRUCTURE_DIRECTIVES = """\
The prompt should:
1. Be well-structured and clear
2. Include specific guidelines and constraints
3. Define the AI's role and behavior clearly
4. Be optimized for the intended use case
"""


def expand(user_prompt: str, parameters: PromptParameters) -> str:
    return f"""Create a {parameters.tone} system prompt based on the following requirements:
{user_prompt}

Please ensure the system prompt follows these specifications:
1. Use a {parameters.tone} tone throughout the prompt
2. Match {parameters.complexity} level complexity
3. {FORMAT_LENGTH[parameters.format]}
4. Include {EXAMPLES_COUNT[parameters.examples]} relevant examples
5. Set up {CONSTRAINT_LEVEL[parameters.constraints]}

{STRUCTURE_DIRECTIVES}"""
