# storegraph/routes/graphql.py
from __future__ import annotations

import logging

import httpx
from fastapi import APIRouter, Depends, HTTPException

from ..context import ResolverContext, get_context
from ..resolvers import MissingArgument, UnknownResolver, registry
from ..schemas.resolve import ResolveIn, ResolveOut, ResolversOut

logger = logging.getLogger("storegraph.graphql")

ROOT_TYPES = ("Query", "Mutation")

router = APIRouter(prefix="/graphql", tags=["graphql"])


@router.post("/resolve", response_model=ResolveOut)
async def resolve(body: ResolveIn, context: ResolverContext = Depends(get_context)) -> ResolveOut:
    """
    Run one resolver from the dispatch table. Resolvers never translate
    errors; this is the only place a failure becomes an HTTP error.
    """
    name = f"{body.type_name}.{body.field_name}"
    if body.type_name not in ROOT_TYPES and body.parent is None:
        raise HTTPException(status_code=400, detail=f"{name} is a field resolver and needs a parent")
    try:
        data = await registry.execute(body.type_name, body.field_name, body.parent, body.args, context)
    except UnknownResolver as exc:
        raise HTTPException(status_code=404, detail=str(exc))
    except httpx.HTTPStatusError as exc:
        logger.warning("%s backend error %s", name, exc.response.status_code)
        raise HTTPException(
            status_code=502,
            detail=f"Backend error {exc.response.status_code}: {exc.response.text[:200]}",
        )
    except httpx.RequestError as exc:
        logger.warning("%s backend request failed: %s", name, exc)
        raise HTTPException(status_code=502, detail=f"Backend request failed: {exc}")
    except MissingArgument as exc:
        raise HTTPException(status_code=400, detail=str(exc))
    return ResolveOut(data=data)


@router.get("/resolvers", response_model=ResolversOut)
def list_resolvers() -> ResolversOut:
    items = registry.describe()
    return ResolversOut(count=len(items), resolvers=items)
