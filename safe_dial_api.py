import os
from typing import Any, Dict

from fastapi import FastAPI, HTTPException

from safe_dial import DEFAULT_START, DialError, parse_instructions, simulate


HOST = os.environ.get("SAFE_DIAL_HOST", "0.0.0.0")
PORT = int(os.environ.get("SAFE_DIAL_PORT", "8000"))

app = FastAPI(title="Safe Dial API", version="0.1.0")


@app.get("/health")
async def health():
    return {"ok": True}


@app.post("/api/simulate")
async def simulate_instructions(data: Dict[str, Any]):
    text = data.get("instructions")
    if not isinstance(text, str):
        raise HTTPException(status_code=400, detail="instructions must be a string")

    start = data.get("start", DEFAULT_START)
    if not isinstance(start, int) or isinstance(start, bool):
        raise HTTPException(status_code=400, detail="start must be an integer")

    instructions = parse_instructions(text)
    # every non-blank line that did not become an instruction was skipped
    non_blank = sum(1 for line in text.splitlines() if line.strip())

    try:
        result = simulate(instructions, start=start)
    except DialError as exc:
        raise HTTPException(status_code=400, detail=str(exc))

    return {
        "password": result.count,
        "final_position": result.final_position,
        "steps": result.steps,
        "skipped": non_blank - len(instructions),
    }


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(app, host=HOST, port=PORT)
