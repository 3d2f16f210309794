from fastapi import FastAPI
from buildex.routes.places_route import router as places_router
from buildex.routes.calculator_route import router as calculator_router

app = FastAPI(title="Buildex Property Services")
app.include_router(places_router)
app.include_router(calculator_router)

# --- Root Endpoint ---
@app.get("/")
async def root():
    return {
        "message": "Welcome to Buildex Property Services API",
        "status": "running",
        "endpoints": {
            "health": "/health",
            "categories": "/places/categories",
            "nearby": "/places/nearby",
            "calculators": "/calculators",
            "docs": "/docs"
        },
        "version": "1.0.0"
    }

# --- Health Check ---
@app.get("/health")
async def health_check():
    return {"status": "ok", "service": "Buildex Property Services"}

if __name__ == "__main__":
    import uvicorn
    uvicorn.run("buildex.main:app", host="0.0.0.0", port=8000, reload=True)
