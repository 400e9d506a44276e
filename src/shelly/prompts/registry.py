"""
Prompt templates for Shelly.

Each mode renders one of a handful of fixed templates. Templates are kept
in a registry so they can be looked up by name and listed, and the module
level builders are the functions the assistant calls.
"""

from dataclasses import dataclass, field
from enum import Enum
from string import Formatter
from typing import Dict, List, Optional
import logging

logger = logging.getLogger(__name__)


class PromptType(Enum):
    """Modes a prompt belongs to."""
    DEBUG = "debug"
    COMMAND = "command"
    QUESTION = "question"


@dataclass
class PromptTemplate:
    """A prompt template with metadata."""
    name: str
    type: PromptType
    template: str
    description: str
    variables: List[str] = field(default_factory=list)

    def render(self, **kwargs: str) -> str:
        """Render the template with provided variables.

        Substituted values are inserted verbatim; braces inside them are
        not interpreted.

        Raises:
            KeyError: A variable used by the template was not provided
        """
        missing = [name for name in self.variables if name not in kwargs]
        if missing:
            raise KeyError(f"Missing variables for prompt '{self.name}': {', '.join(missing)}")
        return self.template.format(**{name: kwargs[name] for name in self.variables})


DEBUG_TEMPLATE = """Command: {piped_input}
Context: {description}

In one short sentence, explain what's wrong. Then provide exactly 3 alternative commands numbered 1-3. Format:

[one short sentence explanation]

1. [command]
2. [command]
3. [command]

Be concise. Order from best to worst. No backticks or markdown formatting."""

COMMAND_TEMPLATE = """Generate 3 terminal commands for: {request}

ONLY output numbered commands, no other text:

1. [command]
2. [command]
3. [command]

Order from best to worst. No backticks or markdown."""

PLAIN_TEXT_RULES = (
    "Be concise. Include examples if helpful. Plain text only, no markdown, "
    "no code blocks, no backticks, no asterisks for bold/italic."
)

QUESTION_WITH_CONTEXT_TEMPLATE = """Context: {context}

Question: {question}

Answer briefly based on the context. """ + PLAIN_TEXT_RULES

QUESTION_TEMPLATE = """Answer briefly: {question}

""" + PLAIN_TEXT_RULES


class PromptRegistry:
    """Registry of prompt templates keyed by name."""

    def __init__(self):
        self._prompts: Dict[str, PromptTemplate] = {}
        self._load_builtin_prompts()

    def register_prompt(
        self,
        name: str,
        template: str,
        prompt_type: PromptType,
        description: str = "",
    ) -> PromptTemplate:
        """Register a prompt template, extracting its variables."""
        if name in self._prompts:
            logger.warning(f"Prompt '{name}' already exists. Overwriting.")

        prompt = PromptTemplate(
            name=name,
            type=prompt_type,
            template=template,
            description=description,
            variables=self._extract_variables(template),
        )
        self._prompts[name] = prompt
        logger.debug(f"Registered prompt: {name}")
        return prompt

    def get_prompt(self, name: str) -> Optional[PromptTemplate]:
        return self._prompts.get(name)

    def get_prompts_by_type(self, prompt_type: PromptType) -> List[PromptTemplate]:
        return [p for p in self._prompts.values() if p.type == prompt_type]

    def list_prompts(self) -> List[str]:
        return sorted(self._prompts)

    def render_prompt(self, name: str, **kwargs: str) -> str:
        """Render a registered prompt.

        Raises:
            KeyError: Unknown prompt name or missing variable
        """
        prompt = self._prompts.get(name)
        if prompt is None:
            raise KeyError(f"Prompt '{name}' not found")
        return prompt.render(**kwargs)

    def _extract_variables(self, template: str) -> List[str]:
        variables = []
        for _, field_name, _, _ in Formatter().parse(template):
            if field_name and field_name not in variables:
                variables.append(field_name)
        return variables

    def _load_builtin_prompts(self) -> None:
        self.register_prompt(
            "debug",
            DEBUG_TEMPLATE,
            PromptType.DEBUG,
            "Explain a failing command and suggest three fixes",
        )
        self.register_prompt(
            "command",
            COMMAND_TEMPLATE,
            PromptType.COMMAND,
            "Suggest three commands for a task",
        )
        self.register_prompt(
            "question_with_context",
            QUESTION_WITH_CONTEXT_TEMPLATE,
            PromptType.QUESTION,
            "Answer a question grounded in piped input",
        )
        self.register_prompt(
            "question",
            QUESTION_TEMPLATE,
            PromptType.QUESTION,
            "Answer a standalone question",
        )


_registry: Optional[PromptRegistry] = None


def get_registry() -> PromptRegistry:
    """Get the shared prompt registry."""
    global _registry
    if _registry is None:
        _registry = PromptRegistry()
    return _registry


def build_debug_prompt(description: str, piped_input: str) -> str:
    """Prompt asking for an explanation and three alternative commands."""
    return get_registry().render_prompt(
        "debug", description=description, piped_input=piped_input
    )


def build_command_prompt(request: str) -> str:
    """Prompt asking for exactly three numbered commands."""
    return get_registry().render_prompt("command", request=request)


def build_question_prompt(question: str, context: Optional[str] = None) -> str:
    """Prompt answering a question, grounded in context when there is any."""
    if context:
        return get_registry().render_prompt(
            "question_with_context", question=question, context=context
        )
    return get_registry().render_prompt("question", question=question)
