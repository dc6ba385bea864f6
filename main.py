from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware
from wdc_portal.controllers import alert_controller, auth_controller, dashboard_controller, partner_controller
from wdc_portal.logging_config import setup_logging
import os

# Structured JSON logging to stdout
log_level = os.getenv("LOG_LEVEL", "INFO")
setup_logging(level=log_level)

app = FastAPI(
	title="WDC Partner Portal API",
	description="Disaster alert dashboard, partner accounts and subscriptions",
	version="1.0.0"
)

# The dashboard frontend is served from a different origin
app.add_middleware(
	CORSMiddleware,
	allow_origins=["*"],
	allow_credentials=False,
	allow_methods=["*"],
	allow_headers=["*"],
)

app.include_router(dashboard_controller.router)
app.include_router(alert_controller.router)
app.include_router(auth_controller.router)
app.include_router(partner_controller.router)

@app.get("/")
async def root():
	return {
		"message": "Welcome to the WDC Partner Portal API!",
		"endpoints": {
			"dashboard": "/dashboard",
			"alerts": "/alerts",
			"auth": "/auth",
			"partner": "/partner"
		}
	}

@app.get("/health")
async def health():
	"""Health check endpoint."""
	return {"status": "healthy"}
