import logging

from fastapi import APIRouter, HTTPException

from datasplit.core.errors import SplitError

from ..models.v1.split_models import SplitRequest, SplitResponse
from ..services.split_service import split_inline

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post("/split", response_model=SplitResponse)
def split_endpoint(req: SplitRequest):
    try:
        result = split_inline(req)
    except SplitError as e:
        raise HTTPException(status_code=400, detail=str(e))

    logger.info(
        "split: %d train / %d test points (seed=%d)",
        result["n_train"], result["n_test"], result["seed"],
    )
    return SplitResponse(**result)
