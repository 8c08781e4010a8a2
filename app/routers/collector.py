"""
Collector Router
Copies the class files compiled from a Java source tree into an output
directory and reports the JDK versions found.

Runs the class_collector package on directories visible to the API
container (the shared /files volume from docker-compose).
"""
import logging
from pathlib import Path
from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, Field

from app.config import settings
from class_collector.errors import (  # type: ignore
    CopyError,
    MissingRoot,
    TraversalError,
    UnresolvedUnit,
)
from class_collector.io.schema import CollectReport  # type: ignore
from class_collector.policy.profile import Profile  # type: ignore
from class_collector.runner import run_collect  # type: ignore

logger = logging.getLogger(__name__)


# =============================================================================
# Request Models
# =============================================================================

class CollectRunRequest(BaseModel):
    """Request to collect class files for a source tree."""
    source_dir: str = Field(..., description="Root of the Java source tree")
    class_dir: str = Field(..., description="Root of the compiled class tree")
    output_dir: Optional[str] = Field(
        None,
        description="Destination root; defaults to <COLLECTOR_OUTPUT_ROOT>/<source dir name>",
    )


# =============================================================================
# Router
# =============================================================================

router = APIRouter()


@router.post(
    "/run",
    response_model=CollectReport,
    status_code=status.HTTP_200_OK,
    summary="Collect class files and non-Java resources for a source tree",
)
async def run_collect_endpoint(request: CollectRunRequest):
    """
    Resolve every ``.java`` file under ``source_dir`` to its class files
    under ``class_dir`` and copy them, plus every non-Java file, into
    ``output_dir``.

    Missing roots are 404.  Nothing is copied when a source file has no
    class file (409).  An unreadable directory or a failed copy is 500.
    A mixed set of JDK versions is reported as verdict ``WARN``.
    """
    source_dir = Path(request.source_dir)
    output_dir = (
        Path(request.output_dir)
        if request.output_dir
        else Path(settings.COLLECTOR_OUTPUT_ROOT) / source_dir.name
    )

    try:
        return run_collect(
            source_dir,
            Path(request.class_dir),
            output_dir,
            profile=Profile.v0(),
            echo=logger.debug,
        )
    except MissingRoot as e:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(e))
    except UnresolvedUnit as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e))
    except (TraversalError, CopyError) as e:
        logger.error("Collector run failed: %s", e)
        raise HTTPException(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR, detail=str(e)
        )
