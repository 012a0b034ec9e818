"""FastAPI web application for do-workspace."""

import logging
from typing import Dict, List, Optional

from fastapi import Depends, FastAPI, HTTPException, Query
from fastapi.responses import Response
from pydantic import BaseModel, Field

from doworkspace import __version__
from doworkspace.board.store import SubmitResult, TaskBoard
from doworkspace.engine.categorizer import categorize, priority_of
from doworkspace.models.constants import (
    CARD_PALETTE,
    EXPORT_FILENAME,
    PRIORITY_COLORS,
    TYPE_COLORS,
    TYPE_LABELS,
)
from doworkspace.models.task import BoardSettings, CardColor, Classification, Priority, Task

logger = logging.getLogger(__name__)

# Initialize FastAPI app
app = FastAPI(
    title="do-workspace API",
    description="Type a task, get a labelled card",
    version=__version__,
)

# In-memory board for the session
board_store = TaskBoard()


def get_board() -> TaskBoard:
    """Dependency returning the session board."""
    return board_store


# Request / response models
class TextRequest(BaseModel):
    """Request carrying free text."""
    text: str = Field(..., description="Text as typed by the user")


class TaskUpdateRequest(BaseModel):
    """Request for updating a task's text and notes."""
    text: str
    notes: str = ""


class SettingsUpdateRequest(BaseModel):
    """Partial settings update; omitted fields are left unchanged."""
    notifications: Optional[bool] = None
    dark_cards: Optional[bool] = None
    auto_label: Optional[bool] = None


class PriorityResponse(BaseModel):
    priority: Priority


class TaskListResponse(BaseModel):
    """Response for listing tasks."""
    tasks: List[Task]
    grouping: bool
    groups: Optional[Dict[str, List[Task]]] = Field(None, description="Tasks grouped by label when grouping is on")


class ClearResponse(BaseModel):
    deleted_count: int


class DisplayResponse(BaseModel):
    """Lookup tables the UI renders with."""
    type_labels: Dict[str, str]
    type_colors: Dict[str, str]
    priority_colors: Dict[str, str]
    card_colors: List[CardColor]


@app.get("/health")
async def health():
    """Health check endpoint."""
    return {"status": "healthy", "version": __version__}


@app.post("/categorize", response_model=Classification)
def categorize_text(request: TextRequest):
    """Classify text without adding it to the board (live label preview)."""
    return categorize(request.text)


@app.get("/priority", response_model=PriorityResponse)
def get_priority(text: str = Query("", description="Text to inspect")):
    """Priority component only."""
    return PriorityResponse(priority=priority_of(text))


@app.get("/display/colors", response_model=DisplayResponse)
async def display_colors():
    """Type/priority color tables and the card palette."""
    return DisplayResponse(
        type_labels={t.value: label for t, label in TYPE_LABELS.items()},
        type_colors={t.value: color for t, color in TYPE_COLORS.items()},
        priority_colors={p.value: color for p, color in PRIORITY_COLORS.items()},
        card_colors=[CardColor(bg=bg, border=border, name=name) for bg, border, name in CARD_PALETTE],
    )


@app.get("/tasks", response_model=TaskListResponse)
def list_tasks(board: TaskBoard = Depends(get_board)):
    """List tasks newest first, plus label groups when grouping is on."""
    return TaskListResponse(
        tasks=board.get_all(),
        grouping=board.grouping,
        groups=board.grouped() if board.grouping else None,
    )


@app.post("/tasks", response_model=SubmitResult)
def submit_task(request: TextRequest, board: TaskBoard = Depends(get_board)):
    """Submit input text: a /command or a new task."""
    try:
        return board.submit(request.text)
    except ValueError as e:
        logger.debug(f"Rejected submission: {e}")
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to add task: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to add task: {str(e)}")


@app.get("/tasks/export")
def export_tasks(board: TaskBoard = Depends(get_board)):
    """Download the board as JSON."""
    try:
        content = board.export_json()
    except Exception as e:
        logger.error(f"Failed to export tasks: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to export tasks: {str(e)}")
    return Response(
        content=content,
        media_type="application/json",
        headers={"Content-Disposition": f'attachment; filename="{EXPORT_FILENAME}"'},
    )


@app.get("/tasks/{task_id}", response_model=Task)
def get_task(task_id: str, board: TaskBoard = Depends(get_board)):
    """Get a single task."""
    task = board.get(task_id)
    if task is None:
        raise HTTPException(status_code=404, detail=f"Task {task_id} not found")
    return task


@app.put("/tasks/{task_id}", response_model=Task)
def update_task(task_id: str, request: TaskUpdateRequest, board: TaskBoard = Depends(get_board)):
    """Update a task's text and notes."""
    try:
        return board.update(task_id, request.text, request.notes)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to update task {task_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update task: {str(e)}")


@app.delete("/tasks/{task_id}", status_code=204)
def delete_task(task_id: str, board: TaskBoard = Depends(get_board)):
    """Delete a task."""
    try:
        board.delete(task_id)
    except ValueError as e:
        raise HTTPException(status_code=404, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to delete task {task_id}: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to delete task: {str(e)}")
    return Response(status_code=204)


@app.delete("/tasks", response_model=ClearResponse)
def clear_tasks(board: TaskBoard = Depends(get_board)):
    """Remove every task from the board."""
    return ClearResponse(deleted_count=board.clear())


@app.get("/settings", response_model=BoardSettings)
def get_settings(board: TaskBoard = Depends(get_board)):
    return board.settings


@app.patch("/settings", response_model=BoardSettings)
def update_settings(request: SettingsUpdateRequest, board: TaskBoard = Depends(get_board)):
    """Partially update board settings."""
    changes = request.model_dump(exclude_none=True)
    try:
        return board.update_settings(**changes)
    except ValueError as e:
        raise HTTPException(status_code=400, detail=str(e))
    except Exception as e:
        logger.error(f"Failed to update settings: {e}")
        raise HTTPException(status_code=500, detail=f"Failed to update settings: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
