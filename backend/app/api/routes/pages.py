"""
Page routes for web interface
"""
from fastapi import APIRouter, Request
from fastapi.responses import HTMLResponse

from app.core.templates import render_template

router = APIRouter(tags=["pages"])


@router.get("/", response_class=HTMLResponse)
async def index(request: Request):
    """Home page rendered inside the root layout"""
    return render_template("index.html", {}, request)


def render_not_found(request: Request) -> HTMLResponse:
    """Not-found page rendered inside the root layout"""
    return render_template("not_found.html", {}, request, status_code=404)
