#!/usr/bin/env python3
"""
Local debug server.
Runs the FastAPI app under Hypercorn with auto-reload and plain-text logging,
which reads better in an IDE console than the JSON logs used in production.

Usage:
	PYTHONDEBUG=1 python debug/local_server.py
"""
import sys
import os

# Add project root to path
project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
if project_root not in sys.path:
	sys.path.insert(0, project_root)

import asyncio
import logging

is_debug_mode = os.getenv("PYTHONDEBUG", "").lower() in ("1", "true") or "--debug" in sys.argv

if is_debug_mode:
	root_logger = logging.getLogger()
	root_logger.setLevel(logging.INFO)
	root_logger.handlers.clear()
	
	stdout_handler = logging.StreamHandler(sys.stdout)
	stdout_handler.setLevel(logging.INFO)
	stdout_handler.setFormatter(logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s'))
	root_logger.addHandler(stdout_handler)
	
	logger = logging.getLogger(__name__)
else:
	from wdc_portal.logging_config import setup_logging, get_logger
	setup_logging(level="INFO")
	logger = get_logger(__name__)


def run_hypercorn():
	"""Run Hypercorn server in the current process."""
	import hypercorn.asyncio
	from hypercorn.config import Config
	from main import app
	from wdc_portal.config import settings
	
	port = settings.port
	logger.info(f"Starting Hypercorn on port {port}...")
	
	config = Config()
	config.bind = [f"[::]:{port}"]
	config.use_reload = True
	
	asyncio.run(hypercorn.asyncio.serve(app, config))


if __name__ == "__main__":
	logger.info("=" * 80)
	logger.info("Starting WDC Partner Portal API (local debug mode)")
	logger.info("=" * 80)
	try:
		run_hypercorn()
	except KeyboardInterrupt:
		logger.info("Received interrupt signal, shutting down")
