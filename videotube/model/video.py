import math
from datetime import datetime
from typing import List, Optional

from pydantic import Field

from videotube.model.base import MongoModel, ObjectIdStr


class VideoDocument(MongoModel):
    id: Optional[ObjectIdStr] = Field(default=None, alias="_id")
    video_file: str
    thumbnail: str
    title: str
    description: str
    duration: float
    views: int = 0
    is_published: Optional[bool] = None
    owner: ObjectIdStr
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class PaginatedResult(MongoModel):
    docs: List[VideoDocument]
    total_docs: int
    limit: int
    page: int
    total_pages: int
    paging_counter: int
    has_prev_page: bool
    has_next_page: bool
    prev_page: Optional[int] = None
    next_page: Optional[int] = None


class VideoModel:
    """The ``videos`` collection with aggregation-based pagination."""

    collection_name = "videos"

    def __init__(self, db):
        self.collection = db[self.collection_name]

    async def create_indexes(self):
        await self.collection.create_index("owner")

    async def aggregate_paginate(self, pipeline: Optional[list] = None, page: int = 1, limit: int = 10) -> PaginatedResult:
        """
        Run ``pipeline`` and return one page of its output.

        Args:
            pipeline: Aggregation stages producing video documents
            page: 1-based page number
            limit: Page size

        Returns:
            PaginatedResult: The page plus the paging metadata
        """
        page = max(int(page), 1)
        limit = max(int(limit), 1)

        stages = list(pipeline or [])
        stages.append({
            "$facet": {
                "docs": [{"$skip": (page - 1) * limit}, {"$limit": limit}],
                "totalDocs": [{"$count": "count"}],
            }
        })

        cursor = await self.collection.aggregate(stages)
        results = await cursor.to_list(length=None)
        facet = results[0] if results else {"docs": [], "totalDocs": []}

        total_docs = facet["totalDocs"][0]["count"] if facet["totalDocs"] else 0
        total_pages = math.ceil(total_docs / limit) if total_docs else 1
        has_prev_page = page > 1
        has_next_page = page < total_pages

        return PaginatedResult(
            docs=[VideoDocument.model_validate(doc) for doc in facet["docs"]],
            total_docs=total_docs,
            limit=limit,
            page=page,
            total_pages=total_pages,
            paging_counter=(page - 1) * limit + 1,
            has_prev_page=has_prev_page,
            has_next_page=has_next_page,
            prev_page=page - 1 if has_prev_page else None,
            next_page=page + 1 if has_next_page else None,
        )
