from typing import Literal, Optional

from fastapi import Depends, Query

from videotube.api.router_base import router_video as router
from videotube.db.dependency import get_video_model
from videotube.model.base import to_object_id
from videotube.model.video import VideoModel
from videotube.utility.api_error import ApiError
from videotube.utility.api_response import ApiResponse
from videotube.utility.async_handler import async_handler


def build_video_pipeline(user_id: Optional[str] = None, sort_by: str = "createdAt", sort_type: str = "desc") -> list:
    match = {"isPublished": True}
    if user_id:
        try:
            match["owner"] = to_object_id(user_id)
        except ValueError:
            raise ApiError(400, "Invalid userId")

    return [
        {"$match": match},
        {"$sort": {sort_by: 1 if sort_type == "asc" else -1}},
    ]


@router.get("")
@async_handler
async def get_all_videos(
        page: int = Query(default=1, ge=1),
        limit: int = Query(default=10, ge=1, le=100),
        user_id: Optional[str] = Query(default=None, alias="userId"),
        sort_by: Literal["createdAt", "views", "duration", "title"] = Query(default="createdAt", alias="sortBy"),
        sort_type: Literal["asc", "desc"] = Query(default="desc", alias="sortType"),
        videos: VideoModel = Depends(get_video_model)
):
    pipeline = build_video_pipeline(user_id, sort_by, sort_type)
    result = await videos.aggregate_paginate(pipeline, page=page, limit=limit)

    return ApiResponse(200, result.to_response(), "Videos fetched successfully").to_dict()
