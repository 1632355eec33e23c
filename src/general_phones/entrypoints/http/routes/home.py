from fastapi import APIRouter, Depends
from fastapi.responses import HTMLResponse

from general_phones.entrypoints.http.dependencies import get_home_page
from general_phones.entrypoints.http.dtos.home_page import HomePageQueryDTO
from general_phones.entrypoints.http.views.home_page import HomePage


router = APIRouter(tags=["Pages"])


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Render catalog homepage",
    description="""
    Server-rendered homepage. The search form and the brand buttons submit
    back here; each request mounts a fresh page and replays the submitted
    search and the selected brand against it.
    """,
)
def get_home(
    query: HomePageQueryDTO = Depends(),
    page: HomePage = Depends(get_home_page),
) -> HTMLResponse:
    page.hero.search.set_draft(query.q)
    page.hero.search.submit()
    page.filters.change(query.brand)

    return HTMLResponse(content=page.render())
