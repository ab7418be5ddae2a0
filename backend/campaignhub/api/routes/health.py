# campaignhub/api/routes/health.py
from fastapi import APIRouter

router = APIRouter()

@router.get("/health")
async def health():
    return {"status": "OK", "message": "CampaignHub API is running"}
