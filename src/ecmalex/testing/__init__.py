from __future__ import annotations

from .corpus import CorpusCase, generate_cases, generate_corpus_files

__all__ = ["CorpusCase", "generate_cases", "generate_corpus_files"]
