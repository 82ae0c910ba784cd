from __future__ import annotations

from fastapi import FastAPI

from dicebag.routers import rolls

app = FastAPI(title="dicebag")

app.include_router(rolls.router)
