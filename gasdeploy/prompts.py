"""
prompts.py

Responsibility: build the natural-language prompts sent for text generation.

Prompts are Jinja2 templates rendered with StrictUndefined, so a missing
context key fails loudly instead of producing a silently incomplete prompt.
File contents and diffs are passed as values, never as template source.
"""

from __future__ import annotations

from typing import Mapping

from jinja2 import Environment, StrictUndefined

EXCERPT_LENGTH = 500
NO_CHANGES_NOTICE = "No changes detected in this update."


def excerpt(text: str, length: int = EXCERPT_LENGTH) -> str:
    if len(text) <= length:
        return text
    return text[:length] + "..."


_env = Environment(
    autoescape=False,
    undefined=StrictUndefined,
    keep_trailing_newline=True,
    trim_blocks=True,
    lstrip_blocks=True,
)
_env.filters["excerpt"] = excerpt

_VERSION_CONTROL = """\
{% if diff.strip() %}
Based on the following git diff, provide a concise summary of the changes:

```
{{ diff }}
```
{% else %}
{{ no_changes }}
{% endif %}
"""

_FULL_README = _env.from_string(
    """
You are an expert technical writer and software architect.
Generate a concise, beautifully formatted Markdown README for the Google Apps Script project named "{{ project }}".
The README should include:

1. An overview and purpose of the project.
2. A list of each file with a brief summary of its functionality.
3. A "Version Control Summary" section that explains the changes in the latest update (based on the provided git diff). If no changes occurred, state that clearly.
4. Usage instructions, dependency notes, and maintenance recommendations.

Below are the details of the project files:
{% for name, content in files.items() %}

### {{ name }}
```javascript
{{ content }}
```
Summary for {{ name }}: Briefly describe what this file does.
{% endfor %}

---
## Version Control Summary
"""
    + _VERSION_CONTROL
    + """
Now generate the complete README.md content in Markdown.
"""
)

_BRIEF_README = _env.from_string(
    """
You are an expert technical writer.
Generate a brief Markdown README for the Google Apps Script project named "{{ project }}".
Keep it short. The README should include:

1. One or two sentences on the purpose of the project.
2. A bullet list of the project files:
{% for name in files %}
   - {{ name }}
{% endfor %}
3. A note stating that no meaningful changes occurred in this update.

Now generate the README.md content in Markdown.
"""
)

_DOCS_INDEX = _env.from_string(
    """
You are an expert technical writer and software architect.
Generate extended technical documentation in Markdown for the Google Apps Script project named "{{ project }}".
The documentation should include the following sections:

1. Overview: what the project does and who it is for.
2. Architecture: how the files work together.
3. File summaries: one subsection per file, based on the excerpts below.
4. Setup instructions: how to install, configure and deploy the project.
5. Recent changes: a summary based on the git diff below.
6. Examples: typical usage examples.
7. Future work: suggested improvements and open issues.

File excerpts (each truncated to at most {{ excerpt_length }} characters):
{% for name, content in files.items() %}

### {{ name }}
```
{{ content | excerpt }}
```
{% endfor %}

---
## Recent Changes
"""
    + _VERSION_CONTROL
    + """
Now generate the complete documentation index (docs/index.md) in Markdown.
"""
)


def full_readme_prompt(project: str, files: Mapping[str, str], diff: str) -> str:
    return _FULL_README.render(project=project, files=files, diff=diff, no_changes=NO_CHANGES_NOTICE)


def brief_readme_prompt(project: str, files: Mapping[str, str]) -> str:
    return _BRIEF_README.render(project=project, files=files)


def docs_index_prompt(project: str, files: Mapping[str, str], diff: str) -> str:
    return _DOCS_INDEX.render(
        project=project,
        files=files,
        diff=diff,
        no_changes=NO_CHANGES_NOTICE,
        excerpt_length=EXCERPT_LENGTH,
    )
