from fastapi import APIRouter

from videotube.constants import API_PREFIX

router_user = APIRouter(
    prefix=f"{API_PREFIX}/users",
    tags=["User"])

router_video = APIRouter(
    prefix=f"{API_PREFIX}/videos",
    tags=["Video"])
