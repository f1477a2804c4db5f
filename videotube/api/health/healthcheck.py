from fastapi import APIRouter

from videotube.constants import API_PREFIX
from videotube.utility.api_response import ApiResponse

router = APIRouter(
    prefix=f"{API_PREFIX}/health",
    tags=["Health"]
)


@router.get(
    "/alive",
    summary="Health Check",
    description="Return data about whether server is live",
    responses={
        200: {
            "description": "When server is alive",
            "content": {
                "application/json": {
                    "example": {"statusCode": 200, "data": {"message": "yes"}, "message": "OK", "success": True}
                }
            }
        }
    }
)
async def healthcheck():
    return ApiResponse(200, {"message": "yes"}, "OK").to_dict()
