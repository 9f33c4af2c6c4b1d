"""FastAPI web application for recurdate."""

import logging
from typing import Optional

from fastapi import FastAPI, HTTPException, Query
from fastapi.responses import HTMLResponse

from recurdate import config
from recurdate.api.models import ExpandResponse, PreviewResponse, SaveResponse
from recurdate.models.recurrence import RecurrenceRule
from recurdate.recurrence.expander import expand_rule
from recurdate.recurrence.rrule_export import rule_to_rrule

logger = logging.getLogger(__name__)

VERSION = "0.1.0"

# Initialize FastAPI app
app = FastAPI(
    title="recurdate API",
    description="Expands recurrence rules into concrete calendar dates",
    version=VERSION,
)


@app.get("/", response_class=HTMLResponse)
async def root():
    """Root endpoint with a basic rule form and preview."""
    return """
    <!DOCTYPE html>
    <html>
    <head>
        <title>recurdate</title>
        <style>
            body { font-family: Arial, sans-serif; max-width: 800px; margin: 50px auto; padding: 20px; }
            button { padding: 10px 20px; margin: 5px; cursor: pointer; }
            label { display: block; margin: 8px 0; }
            .section { margin: 20px 0; padding: 15px; border: 1px solid #ddd; border-radius: 5px; }
            ul { columns: 3; }
        </style>
    </head>
    <body>
        <h1>recurdate</h1>
        <p>Configure a recurrence and preview the dates it produces.</p>

        <div class="section">
            <h2>Rule</h2>
            <label>Start date <input type="date" id="start_date" required></label>
            <label>End date (optional) <input type="date" id="end_date"></label>
            <label>Repeat
                <select id="frequency">
                    <option value="daily">Daily</option>
                    <option value="weekly">Weekly</option>
                    <option value="monthly">Monthly</option>
                    <option value="yearly">Yearly</option>
                </select>
            </label>
            <label>Every <input type="number" id="interval" min="1" max="365" value="1"></label>
            <label>Days of the week (weekly)
                <span id="weekdays"></span>
            </label>
            <label>Monthly pattern
                <select id="monthly_pattern">
                    <option value="day_of_month">On the start date's day of month</option>
                    <option value="nth_weekday">On the Nth weekday</option>
                </select>
                <select id="ordinal">
                    <option value="1">First</option>
                    <option value="2">Second</option>
                    <option value="3">Third</option>
                    <option value="4">Fourth</option>
                    <option value="-1">Last</option>
                </select>
                <select id="weekday"></select>
            </label>
            <button onclick="preview()">Preview</button>
            <button onclick="save()">Save Recurrence</button>
        </div>

        <div class="section">
            <h2>Status</h2>
            <div id="status"></div>
        </div>

        <div class="section">
            <h2>Preview</h2>
            <div id="preview"></div>
        </div>

        <script>
            const DAYS = ['Sun', 'Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat'];
            document.getElementById('weekdays').innerHTML = DAYS.map((d, i) =>
                `<input type="checkbox" class="wd" value="${i}"> ${d}`).join(' ');
            document.getElementById('weekday').innerHTML = DAYS.map((d, i) =>
                `<option value="${i}" ${i === 1 ? 'selected' : ''}>${d}day</option>`).join('');
            document.getElementById('start_date').value = new Date().toISOString().split('T')[0];

            function buildRule() {
                return {
                    start_date: document.getElementById('start_date').value,
                    end_date: document.getElementById('end_date').value,
                    frequency: document.getElementById('frequency').value,
                    interval: parseInt(document.getElementById('interval').value) || 1,
                    selected_weekdays: Array.from(document.querySelectorAll('.wd:checked')).map(e => parseInt(e.value)),
                    monthly_pattern: document.getElementById('monthly_pattern').value,
                    ordinal: parseInt(document.getElementById('ordinal').value),
                    weekday: parseInt(document.getElementById('weekday').value),
                };
            }

            async function post(path) {
                const response = await fetch(path, {
                    method: 'POST',
                    headers: { 'Content-Type': 'application/json' },
                    body: JSON.stringify(buildRule()),
                });
                const data = await response.json();
                if (!response.ok) {
                    throw new Error(JSON.stringify(data.detail || response.statusText));
                }
                return data;
            }

            async function preview() {
                const status = document.getElementById('status');
                try {
                    const data = await post('/recurrence/preview');
                    status.innerHTML = `${data.total_count} dates` + (data.truncated ? ' (truncated)' : '');
                    document.getElementById('preview').innerHTML =
                        '<ul>' + data.dates.map(d => `<li>${d}</li>`).join('') + '</ul>' +
                        `<p>Showing up to ${data.limit} recurring dates</p>`;
                } catch (error) {
                    status.innerHTML = 'Error: ' + error.message;
                }
            }

            async function save() {
                const status = document.getElementById('status');
                try {
                    const data = await post('/recurrence/save');
                    status.innerHTML = `Saved! Generated ${data.count} recurring dates. RRULE: ${data.rrule}`;
                } catch (error) {
                    status.innerHTML = 'Error: ' + error.message;
                }
            }
        </script>
    </body>
    </html>
    """


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": VERSION}


@app.post("/recurrence/expand", response_model=ExpandResponse)
async def expand_recurrence(rule: RecurrenceRule):
    """Expand a rule into all of its dates."""
    try:
        result = expand_rule(rule)
    except Exception as e:
        logger.error(f"Failed to expand rule: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to expand rule: {str(e)}")

    return ExpandResponse(dates=result.dates, count=len(result.dates), truncated=result.truncated)


@app.post("/recurrence/preview", response_model=PreviewResponse)
async def preview_recurrence(rule: RecurrenceRule, limit: Optional[int] = Query(None, ge=1)):
    """Expand a rule and return only the first dates (for the preview calendar)."""
    limit = limit or config.PREVIEW_LIMIT
    try:
        result = expand_rule(rule)
    except Exception as e:
        logger.error(f"Failed to preview rule: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to preview rule: {str(e)}")

    return PreviewResponse(
        dates=result.dates[:limit],
        total_count=len(result.dates),
        truncated=result.truncated,
        limit=limit,
    )


@app.post("/recurrence/save", response_model=SaveResponse)
async def save_recurrence(rule: RecurrenceRule):
    """Build the saved configuration (rule + dates) for the caller to store."""
    try:
        result = expand_rule(rule)
        rrule = rule_to_rrule(rule)
    except Exception as e:
        logger.error(f"Failed to save rule: {type(e).__name__}: {str(e)}")
        raise HTTPException(status_code=500, detail=f"Failed to save rule: {str(e)}")

    logger.debug(f"Saved {rule.frequency.value} rule with {len(result.dates)} dates")
    return SaveResponse(
        rule=rule,
        start_date=rule.start_date,
        end_date=rule.end_date,
        frequency=rule.frequency,
        dates=result.dates,
        count=len(result.dates),
        truncated=result.truncated,
        rrule=rrule,
    )


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=config.HOST, port=config.PORT)
