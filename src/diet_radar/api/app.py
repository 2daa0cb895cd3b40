"""FastAPI application factory."""

import logging
from collections.abc import AsyncIterator
from contextlib import asynccontextmanager
from uuid import UUID

from fastapi import FastAPI, HTTPException, Request, status
from fastapi.responses import HTMLResponse

from diet_radar.api.admin import router as admin_router
from diet_radar.api.event_models import LegendEvent
from diet_radar.app_logging import configure_logging
from diet_radar.containers import AppContainer
from diet_radar.domain.chart import SimilarityView
from diet_radar.domain.diets import is_known_diet
from diet_radar.domain.interaction import InteractionState


def create_app(container: AppContainer) -> FastAPI:
    """Create a FastAPI app configured with dependencies."""
    configure_logging(debug=container.settings.debug)
    logger = logging.getLogger(__name__)

    @asynccontextmanager
    async def lifespan(app: FastAPI) -> AsyncIterator[None]:
        try:
            app.state.container.chart_service.rows()
        except Exception:
            logger.exception("Failed to load diet dataset")
        yield

    app = FastAPI(lifespan=lifespan)
    app.state.container = container

    app.include_router(admin_router)

    @app.get("/health")
    async def health() -> dict[str, str]:
        """Simple health check endpoint."""
        return {"status": "ok"}

    @app.get("/", response_class=HTMLResponse)
    async def chart_page() -> HTMLResponse:
        """Chart page that draws both radars from the API."""
        return HTMLResponse(_CHART_PAGE_HTML)

    @app.get("/chart/rows")
    async def chart_rows(request: Request) -> dict[str, object]:
        """Return the normalized, shifted chart rows."""
        state_container: AppContainer = request.app.state.container
        return {"rows": state_container.chart_service.rows()}

    @app.post("/views", status_code=status.HTTP_201_CREATED)
    async def start_view(request: Request) -> dict[str, object]:
        """Open a chart view with every diet visible."""
        state_container: AppContainer = request.app.state.container
        session_id, state = state_container.view_session_service.start_session()
        return _view_payload(state_container, session_id, state)

    @app.get("/views/{session_id}")
    async def get_view(session_id: UUID, request: Request) -> dict[str, object]:
        """Return the chart view for the session's current state."""
        state_container: AppContainer = request.app.state.container
        state = state_container.view_session_service.get_state(session_id)
        if state is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        return _view_payload(state_container, session_id, state)

    @app.post("/views/{session_id}/events")
    async def legend_event(
        session_id: UUID, event: LegendEvent, request: Request
    ) -> dict[str, object]:
        """Apply a legend click or hover and return the updated view."""
        state_container: AppContainer = request.app.state.container
        if event.diet is not None and not is_known_diet(event.diet):
            raise HTTPException(
                status_code=status.HTTP_404_NOT_FOUND,
                detail=f"Unknown diet: {event.diet}",
            )
        if event.type != "pointer_leave" and event.diet is None:
            raise HTTPException(
                status_code=status.HTTP_400_BAD_REQUEST,
                detail=f"Event {event.type} requires a diet",
            )
        state = state_container.view_session_service.handle_event(
            session_id, event.to_domain()
        )
        if state is None:
            raise HTTPException(status_code=status.HTTP_404_NOT_FOUND)
        if state_container.settings.debug:
            logger.info(
                "Legend event applied: session=%s type=%s diet=%s",
                session_id,
                event.type,
                event.diet,
            )
        return _view_payload(state_container, session_id, state)

    @app.get("/similarity")
    async def similarity(request: Request) -> SimilarityView:
        """Return the similarity radar data."""
        state_container: AppContainer = request.app.state.container
        return state_container.chart_service.build_similarity_view()

    return app


def _view_payload(
    state_container: AppContainer, session_id: UUID, state: InteractionState
) -> dict[str, object]:
    return {
        "session_id": str(session_id),
        "view": state_container.chart_service.build_view(state),
    }


_CHART_PAGE_HTML = """<!doctype html>
<html lang="en">
  <head>
    <meta charset="utf-8" />
    <meta name="viewport" content="width=device-width, initial-scale=1" />
    <title>Diet Radar</title>
    <script src="https://cdn.jsdelivr.net/npm/chart.js@4"></script>
    <style>
      body { font-family: ui-sans-serif, system-ui, sans-serif; margin: 0; }
      main { background: #fafafa; padding: 1rem; }
      h1, h2 { text-align: center; }
      .legend { display: flex; justify-content: center; gap: 1rem; flex-wrap: wrap; padding: 1rem; }
      .chip { display: flex; align-items: center; cursor: pointer; padding: 0.5rem; border-radius: 0.25rem; }
      .dot { width: 12px; height: 12px; border-radius: 50%; margin-right: 8px; }
      .radar { height: 800px; margin-bottom: 2rem; }
      .similarity { height: 400px; background: #f0f0f0; padding: 20px; border: 1px solid #ccc; }
    </style>
  </head>
  <body>
    <main>
      <h1 id="title">Diet Category Radar Chart</h1>
      <div id="legend" class="legend"></div>
      <div class="radar"><canvas id="radar"></canvas></div>
      <div class="similarity">
        <h2 id="similarity-title">Diet Similarity</h2>
        <canvas id="similarity"></canvas>
      </div>
    </main>
    <script>
      const colorContext = document.createElement('canvas').getContext('2d');
      let sessionId = null;
      let radarChart = null;

      function withAlpha(color, alpha) {
        colorContext.fillStyle = color;
        const hex = colorContext.fillStyle;
        const r = parseInt(hex.slice(1, 3), 16);
        const g = parseInt(hex.slice(3, 5), 16);
        const b = parseInt(hex.slice(5, 7), 16);
        return `rgba(${r}, ${g}, ${b}, ${alpha})`;
      }

      function datasets(view) {
        const center = {
          label: view.center_fill.data_key,
          data: view.rows.map((row) => row.center_fill),
          backgroundColor: withAlpha(view.center_fill.fill, view.center_fill.fill_opacity),
          borderWidth: 0,
          pointRadius: 0,
          fill: true
        };
        const series = view.series.map((s) => ({
          label: s.name,
          data: view.rows.map((row) => row.values[s.key]),
          backgroundColor: withAlpha(s.color, s.fill_opacity),
          borderColor: withAlpha(s.color, s.stroke_opacity),
          pointRadius: 0,
          fill: true
        }));
        return [center, ...series];
      }

      function renderLegend(view) {
        const legend = document.getElementById('legend');
        if (legend.children.length === view.legend.length) {
          view.legend.forEach((item, index) => {
            legend.children[index].style.background = item.background;
          });
          return;
        }
        for (const item of view.legend) {
          const chip = document.createElement('div');
          chip.className = 'chip';
          chip.style.background = item.background;
          chip.onclick = () => sendEvent('click', item.key);
          chip.onmouseenter = () => sendEvent('pointer_enter', item.key);
          chip.onmouseleave = () => sendEvent('pointer_leave', null);
          const dot = document.createElement('div');
          dot.className = 'dot';
          dot.style.backgroundColor = item.color;
          const label = document.createElement('span');
          label.textContent = item.name;
          chip.append(dot, label);
          legend.append(chip);
        }
      }

      function render(view) {
        document.getElementById('title').textContent = view.title;
        renderLegend(view);
        if (radarChart) {
          radarChart.data.datasets = datasets(view);
          radarChart.update('none');
          return;
        }
        const [min, max] = view.radius_axis.domain;
        radarChart = new Chart(document.getElementById('radar'), {
          type: 'radar',
          data: { labels: view.rows.map((row) => row.label), datasets: datasets(view) },
          options: {
            maintainAspectRatio: false,
            plugins: { legend: { display: false } },
            scales: {
              r: {
                min, max,
                ticks: { display: false, count: view.radius_axis.tick_count },
                grid: { circular: view.radius_axis.grid_type === 'circle' },
                angleLines: { display: view.radius_axis.radial_lines },
                pointLabels: { color: '#333', font: { size: 12 } }
              }
            }
          }
        });
      }

      let eventQueue = Promise.resolve();

      function sendEvent(type, diet) {
        eventQueue = eventQueue.then(async () => {
          const res = await fetch(`/views/${sessionId}/events`, {
            method: 'POST',
            headers: { 'Content-Type': 'application/json' },
            body: JSON.stringify({ type, diet })
          });
          if (res.ok) {
            render((await res.json()).view);
          }
        }).catch(() => {});
        return eventQueue;
      }

      async function renderSimilarity() {
        const res = await fetch('/similarity');
        const view = await res.json();
        document.getElementById('similarity-title').textContent = view.title;
        new Chart(document.getElementById('similarity'), {
          type: 'radar',
          data: {
            labels: view.points.map((p) => p.name),
            datasets: [{
              data: view.points.map((p) => p.value),
              borderColor: view.stroke,
              backgroundColor: withAlpha(view.fill, view.fill_opacity),
              fill: true
            }]
          },
          options: { maintainAspectRatio: false, plugins: { legend: { display: false } } }
        });
      }

      async function start() {
        const res = await fetch('/views', { method: 'POST' });
        const payload = await res.json();
        sessionId = payload.session_id;
        render(payload.view);
        await renderSimilarity();
      }

      start();
    </script>
  </body>
</html>
"""
