"""Search service implementation.

Matching is word based rather than substring based: the query and the note
text are split into lowercase words and a note matches when it shares at
least one whole word with the query. Title hits weigh double.
"""

import logging
import re
import time
from collections import Counter
from typing import List, Optional, Tuple

from sqlalchemy.ext.asyncio import AsyncSession

from ...security.jwt import Identity
from ..models.note import Note
from ..repositories.note_repository import NoteRepository
from ..results import Ok, Result
from ..schemas.notes import NoteResponse
from .interfaces import ISearchService
from .note_service import to_response

logger = logging.getLogger(__name__)

WORD_PATTERN = re.compile(r"\w+", re.UNICODE)
TITLE_WEIGHT = 2
CONTENT_WEIGHT = 1
# each term adds two LIKE clauses to the prefilter
MAX_QUERY_TERMS = 32


def tokenize(text: Optional[str]) -> List[str]:
    """Lowercase word tokens of ``text``."""
    if not text:
        return []
    return [word.lower() for word in WORD_PATTERN.findall(text)]


def query_terms(query: Optional[str]) -> List[str]:
    """Distinct query terms, in query order, at most ``MAX_QUERY_TERMS``."""
    return list(dict.fromkeys(tokenize(query)))[:MAX_QUERY_TERMS]


def relevance(note: Note, terms: List[str]) -> int:
    """Score a note against query terms; 0 means no match."""
    title_words = Counter(tokenize(note.title))
    content_words = Counter(tokenize(note.content))
    return sum(
        TITLE_WEIGHT * title_words[term] + CONTENT_WEIGHT * content_words[term] for term in terms
    )


class SearchService(ISearchService):
    """Search over the caller's own notes."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.note_repo = NoteRepository(session)

    async def search_notes(self, identity: Identity, query: Optional[str]) -> Result[List[NoteResponse]]:
        """Search owned notes. An empty or blank query matches nothing."""
        start_time = time.time()

        terms = query_terms(query)
        if not terms:
            return Ok([])

        candidates = await self.note_repo.search_candidates(identity.id, terms)

        scored: List[Tuple[int, Note]] = []
        for note in candidates:
            score = relevance(note, terms)
            if score > 0:
                scored.append((score, note))
        scored.sort(key=lambda item: item[0], reverse=True)

        logger.info(
            "Search completed",
            extra={
                "user_id": str(identity.id),
                "terms": len(terms),
                "candidates": len(candidates),
                "matches": len(scored),
                "search_time_ms": round((time.time() - start_time) * 1000, 2),
            },
        )
        return Ok([to_response(note) for _, note in scored])
