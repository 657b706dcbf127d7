import logging
from typing import Optional

from fastapi import FastAPI
from fastapi.responses import RedirectResponse

from .gateway import CoachingGateway
from .lessons import LessonCatalog
from .roster import StudentStore
from .seed import DEMO_LESSON_PLANS, DEMO_STUDENTS
from .settings import settings
from .routers import students
from .routers import lessons
from .routers import observation
from .routers import exit_tickets
from .routers import reflection
from .routers import dashboard

logger = logging.getLogger(__name__)


def create_app(
	store: Optional[StudentStore] = None,
	catalog: Optional[LessonCatalog] = None,
	gateway: Optional[CoachingGateway] = None,
) -> FastAPI:
	logging.basicConfig(
		level=settings.log_level.upper(),
		format="%(asctime)s %(levelname)s %(name)s: %(message)s",
	)
	app = FastAPI(title="EduElevate Coaching API")
	# One roster per app instance, owned here and handed to routes via Depends
	if store is None:
		store = StudentStore(DEMO_STUDENTS if settings.seed_demo_data else None)
	if catalog is None:
		catalog = LessonCatalog(DEMO_LESSON_PLANS if settings.seed_demo_data else None)
	app.state.store = store
	app.state.catalog = catalog
	app.state.gateway = gateway or CoachingGateway()

	app.include_router(students.router)
	app.include_router(lessons.router)
	app.include_router(observation.router)
	app.include_router(exit_tickets.router)
	app.include_router(reflection.router)
	app.include_router(dashboard.router)

	@app.get("/", include_in_schema=False)
	async def redirect_root_to_docs():
		return RedirectResponse(url="/docs")

	@app.get("/info")
	async def info():
		return {"status": "ok", "gemini_configured": bool(settings.gemini_api_key)}

	logger.info("App ready with %d students and %d lesson plans", len(store), len(catalog))
	return app


app = create_app()
