"""ASGI entrypoint for the diet radar API."""

from diet_radar.api.app import create_app
from diet_radar.containers import build_container

app = create_app(build_container())
