# -----------------------------------------------------------------------------
# /*
#  * Copyright (C) 2025 aic
#  *
#  * This program is free software; you can redistribute it and/or modify
#  * it under the terms of the GNU General Public License as published by
#  * the Free Software Foundation; Version 2.
#  *
#  * This program is distributed in the hope that it will be useful,
#  * but WITHOUT ANY WARRANTY; without even the implied warranty of
#  * MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE. See the
#  * GNU General Public License for more details.
#  *
#  * You should have received a copy of the GNU General Public License
#  * along with this program; if not, see <https://www.gnu.org/licenses/>.
#  */
# -----------------------------------------------------------------------------
"""
Prompts for explaining, drafting and categorizing git changes.
"""

import json
from dataclasses import dataclass

from aic.core.data.models import FileChange
from aic.core.exceptions import CommandError
from aic.core.git_entity.entity import CommitEntity, DiffEntity, GitEntity


@dataclass(frozen=True)
class Prompt:
    system_prompt: str
    user_prompt: str


CONVENTIONAL_TYPES = {
    "feat": "A new feature",
    "fix": "A bug fix",
    "docs": "Documentation only changes",
    "style": "Changes that do not affect the meaning of the code",
    "refactor": "A code change that neither fixes a bug nor adds a feature",
    "perf": "A code change that improves performance",
    "test": "Adding missing tests or correcting existing tests",
    "build": "Changes that affect the build system or external dependencies",
    "ci": "Changes to our CI configuration files and scripts",
    "chore": "Other changes that don't modify src or test files",
    "revert": "Reverts a previous commit",
}


# -----------------------------------------------------------------------------
# Explain Prompts
# -----------------------------------------------------------------------------

EXPLAIN_SYSTEM = (
    "You are a helpful assistant that explains Git changes in a concise way. "
    "Focus only on the most significant changes and their direct impact. "
    "When answering specific questions, address them directly and precisely. "
    "Keep explanations brief but informative and don't ask for further explanations. "
    "Use markdown for clarity."
)

EXPLAIN_COMMIT_CONTEXT = """Context - Commit:

Message: {message}
Changes:
```diff
{diff}
```"""

EXPLAIN_DIFF_CONTEXT = """Context - Changes:

```diff
{diff}
```"""

EXPLAIN_QUESTION = """{context}

Question: {query}
Provide a focused answer to the question based on the changes shown above."""

EXPLAIN_SUMMARY = """{context}

Provide a short explanation covering:
1. Core changes made
2. Direct impact"""


# -----------------------------------------------------------------------------
# Draft Prompts
# -----------------------------------------------------------------------------

DRAFT_SYSTEM = """You are a git commit message generator. Your task is to generate a SINGLE conventional commit message.
Rules:
1. Generate ONLY ONE commit message
2. Use present tense
3. Follow format: <type>(<optional scope>): <description>
4. Keep under 72 characters
5. NO explanations, NO comments, NO additional text
6. If multiple changes are present, choose the most significant one
7. Your entire response should be just one line of text
8. NO markdown formatting (no **, __, #, etc.)
9. NO special characters except those in the format
10. Output raw text only"""

DRAFT_USER = """{intent}
Generate a SINGLE commit message for the following changes:

```diff
{diff}
```

Available types: {types}

Remember:
- Output ONLY ONE commit message
- Format: <type>(<optional scope>): <description>
- 72 characters maximum
- If multiple changes, focus on the most significant one
- NO markdown formatting (no **, __, #, etc.)
- NO special characters except those in the format
- Output raw text only
- Your entire response should be a single line"""


# -----------------------------------------------------------------------------
# Categorize Prompts
# -----------------------------------------------------------------------------

CATEGORIZE_SYSTEM = """You are a code change categorizer. Your ONLY task is to output a JSON array grouping related files.
Rules:
1. Output ONLY the JSON array, nothing else
2. NO explanations
3. NO markdown
4. NO comments
5. NO backticks
6. NO json keyword
7. Response MUST start with [ and end with ]
8. Use "category" NOT "purpose"
9. Each file must have path and status
10. NO additional text or formatting
11. Files array must contain full objects
12. NO shorthand array syntax
13. Use specific categories like:
    - "api-endpoints" for API-related files
    - "ai-providers" for AI provider implementations
    - "core-services" for main service files
    - "type-definitions" for type files
    - "project-config" for configuration files
    - "documentation" for docs and README
    - "database-services" for DB-related files
    - "utilities" for helper functions
14. Group files by their specific functionality"""

CATEGORIZE_USER = """Categorize these files into specific logical groups:
{changes}

RESPOND ONLY WITH A JSON ARRAY IN THIS EXACT FORMAT:
[
  {{
    "category": "documentation",
    "files": [
      {{"path": "README.md", "status": "modified"}}
    ]
  }},
  {{
    "category": "project-config",
    "files": [
      {{"path": "pyproject.toml", "status": "modified"}},
      {{"path": ".env.example", "status": "modified"}}
    ]
  }}
]

IMPORTANT:
1. Use "category" NOT "purpose"
2. Each file must be a full object with path and status
3. NO backticks, NO json keyword
4. NO shorthand array syntax like ["file1", "file2"]
5. Output raw JSON only
6. Use specific categories based on functionality
7. Separate services, providers, APIs, and configurations
8. Every file must be in exactly one category
9. Every file must have both path and status properties"""


# -----------------------------------------------------------------------------
# Builders
# -----------------------------------------------------------------------------


def build_explain_prompt(entity: GitEntity, query: str | None = None) -> Prompt:
    if isinstance(entity, CommitEntity):
        context = EXPLAIN_COMMIT_CONTEXT.format(
            message=entity.data.message, diff=entity.data.diff
        )
    else:
        context = EXPLAIN_DIFF_CONTEXT.format(diff=entity.data.diff)

    if query:
        user_prompt = EXPLAIN_QUESTION.format(context=context, query=query)
    else:
        user_prompt = EXPLAIN_SUMMARY.format(context=context)

    return Prompt(EXPLAIN_SYSTEM, user_prompt)


def build_draft_prompt(entity: GitEntity, context: str | None = None) -> Prompt:
    if not isinstance(entity, DiffEntity):
        raise CommandError("`draft` is only supported for diffs")

    intent = f"Intent context: {context}\n" if context else ""
    user_prompt = DRAFT_USER.format(
        intent=intent,
        diff=entity.data.diff,
        types=", ".join(CONVENTIONAL_TYPES),
    )
    return Prompt(DRAFT_SYSTEM, user_prompt)


def build_categorize_prompt(changes: list[FileChange]) -> Prompt:
    changes_json = json.dumps(
        [change.model_dump(mode="json") for change in changes], indent=2
    )
    return Prompt(CATEGORIZE_SYSTEM, CATEGORIZE_USER.format(changes=changes_json))
