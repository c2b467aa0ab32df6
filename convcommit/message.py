"""Commit Message - structured Conventional Commits record and formatter."""

from dataclasses import dataclass, fields
from typing import Optional


@dataclass(frozen=True)
class CommitMessage:
    """A parsed Conventional Commits message.

    Build one with parse() or construct it directly; either way the
    required fields must be non-empty and optional ones absent or non-empty.
    """
    commit_type: str
    description: str
    scope: Optional[str] = None
    body: Optional[str] = None
    is_breaking_change: bool = False

    def __post_init__(self):
        if not self.commit_type:
            raise ValueError("commit_type must not be empty")
        if not self.description:
            raise ValueError("description must not be empty")
        if self.scope is not None and not self.scope:
            raise ValueError("scope must be None or non-empty")
        if self.body is not None and not self.body:
            raise ValueError("body must be None or non-empty")

    @property
    def is_new_feature(self) -> bool:
        return self.commit_type.lower() == 'feat'

    @property
    def is_bug_fix(self) -> bool:
        return self.commit_type.lower() == 'fix'

    @property
    def header(self) -> str:
        """type(scope)! prefix, without the description."""
        prefix = self.commit_type
        if self.scope is not None:
            prefix = f"{prefix}({self.scope})"
        if self.is_breaking_change:
            prefix += '!'
        return prefix

    def to_dict(self) -> dict:
        return {
            'commit_type': self.commit_type,
            'scope': self.scope,
            'description': self.description,
            'body': self.body,
            'is_breaking_change': self.is_breaking_change,
            'is_new_feature': self.is_new_feature,
            'is_bug_fix': self.is_bug_fix,
        }

    @classmethod
    def from_dict(cls, data: dict) -> 'CommitMessage':
        valid_keys = {f.name for f in fields(cls)}
        return cls(**{k: v for k, v in data.items() if k in valid_keys})

    def __str__(self) -> str:
        return format_message(self)


def format_message(commit: CommitMessage) -> str:
    """Render a commit in canonical form: one header line, a blank line, the body."""
    subject = f"{commit.header}: {commit.description}"
    if commit.body is None:
        return subject
    return f"{subject}\n\n{commit.body}"
