from dataclasses import asdict

from fastapi import FastAPI

from allocator import config
from allocator.adapters import reporter
from allocator.entrypoints.schemas import AllocateRequest, AllocateResponse
from allocator.service_layer.services import AllocationEngine

app = FastAPI(title="inventory-allocator")


@app.get("/health")
def health_check():
    return {"status": "healthy"}


@app.get("/inventory")
def get_inventory():
    return config.get_initial_inventory()


@app.post("/allocations", status_code=201, response_model=AllocateResponse)
def allocate(payload: AllocateRequest):
    engine = AllocationEngine(inventory=payload.inventory)
    reports = engine.run(payload.orders)
    return {
        "reports": [asdict(report) for report in reports],
        "lines": reporter.render_reports(reports),
        "inventory": engine.catalog.snapshot(),
    }
