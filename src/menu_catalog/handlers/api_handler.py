"""FastAPI application exposing the menu catalog."""

import logging

from fastapi import FastAPI, HTTPException, status
from pydantic import BaseModel

from menu_catalog.models.forms import AddDishForm
from menu_catalog.models.menu_models import ALL_COURSES, CourseStat, MenuItem
from menu_catalog.models.view_models import FilterView, HomeView
from menu_catalog.services import view_engine
from menu_catalog.services.menu_service import MenuService

logger = logging.getLogger(__name__)


class HealthResponse(BaseModel):
    """Health check response model."""

    status: str


class DeleteDishResponse(BaseModel):
    """Response model for dish deletion."""

    item_id: str
    deleted: bool


class CoursesResponse(BaseModel):
    """Response model for the distinct courses on the menu."""

    courses: list[str]


def create_app(menu_service: MenuService) -> FastAPI:
    """Create and configure the FastAPI application.

    Args:
        menu_service: Service backing every endpoint

    Returns:
        Configured FastAPI application
    """
    app = FastAPI(
        title="Menu Catalog API",
        description="Manage menu dishes and view per-course statistics",
        version="1.0.0",
    )

    # Store services in app state for access in route handlers
    app.state.menu_service = menu_service

    @app.get("/health", response_model=HealthResponse, tags=["Health"])
    async def health_check() -> HealthResponse:
        """Health check endpoint."""
        return HealthResponse(status="healthy")

    @app.get("/dishes", response_model=list[MenuItem], tags=["Dishes"])
    async def list_dishes() -> list[MenuItem]:
        """List every dish in catalog order."""
        return list(app.state.menu_service.list_dishes())

    @app.get("/dishes/{item_id}", response_model=MenuItem, tags=["Dishes"])
    async def get_dish(item_id: str) -> MenuItem:
        """Get a single dish.

        Raises:
            HTTPException: If the dish does not exist
        """
        item: MenuItem | None = app.state.menu_service.get_dish(item_id)
        if item is None:
            raise HTTPException(status_code=404, detail=f"Dish {item_id} not found")
        return item

    @app.post(
        "/dishes",
        response_model=MenuItem,
        status_code=status.HTTP_201_CREATED,
        tags=["Dishes"],
    )
    async def add_dish(form: AddDishForm) -> MenuItem:
        """Add a dish from the add-dish form.

        Raises:
            HTTPException: 422 with the first validation message if the form is rejected
        """
        result = app.state.menu_service.add_dish(form)
        if not result.success:
            raise HTTPException(status_code=422, detail=result.error_message)

        logger.info(f"Dish {result.item.id} added via API")
        return result.item

    @app.delete("/dishes/{item_id}", response_model=DeleteDishResponse, tags=["Dishes"])
    async def delete_dish(item_id: str) -> DeleteDishResponse:
        """Delete a dish. Deleting an unknown dish is not an error."""
        deleted = app.state.menu_service.delete_dish(item_id)
        return DeleteDishResponse(item_id=item_id, deleted=deleted)

    @app.get("/courses", response_model=CoursesResponse, tags=["Courses"])
    async def list_courses() -> CoursesResponse:
        """Distinct courses currently on the menu, in discovery order."""
        items = app.state.menu_service.list_dishes()
        return CoursesResponse(courses=list(view_engine.unique_courses(items)))

    @app.get("/courses/stats", response_model=list[CourseStat], tags=["Courses"])
    async def get_course_stats() -> list[CourseStat]:
        """Dish count and average price per course."""
        return view_engine.course_stats(app.state.menu_service.list_dishes())

    @app.get("/home", response_model=HomeView, tags=["Screens"])
    async def home() -> HomeView:
        """Home screen view."""
        view: HomeView = app.state.menu_service.home_view()
        return view

    @app.get("/filter", response_model=FilterView, tags=["Screens"])
    async def filter_menu(course: str = ALL_COURSES) -> FilterView:
        """Filter screen view for a course selection."""
        view: FilterView = app.state.menu_service.filter_view(course)
        return view

    return app
