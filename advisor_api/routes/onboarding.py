"""Onboarding quiz and plan pricing endpoints."""

from fastapi import APIRouter, HTTPException
from pydantic import BaseModel, Field

from advisor_api.core.onboarding import (
    QUIZ_QUESTIONS,
    BillingPeriod,
    QuizSession,
    price_all_plans,
    recommend_plan,
)
from advisor_api.domain.exceptions import DataValidationError

router = APIRouter()


class QuestionModel(BaseModel):
    question: str
    options: list[str]


class QuizResultRequest(BaseModel):
    """Answers to the onboarding quiz, in question order."""

    answers: list[str] = Field(..., description="One chosen option per question")
    billing: BillingPeriod = Field(BillingPeriod.MONTHLY, description="Billing period for pricing")


class PlanPriceModel(BaseModel):
    tier: str
    name: str
    popular: bool
    features: list[str]
    billing: BillingPeriod
    price: str
    period: str
    annual: str | None = None
    savings: str | None = None


class QuizResultResponse(BaseModel):
    recommended_plan: str
    plans: list[PlanPriceModel]


@router.get("/questions", response_model=list[QuestionModel])
def list_questions() -> list[QuestionModel]:
    """Get the onboarding quiz questions, in order."""
    return [QuestionModel(**q.to_dict()) for q in QUIZ_QUESTIONS]


@router.post("/result", response_model=QuizResultResponse)
def quiz_result(request: QuizResultRequest) -> QuizResultResponse:
    """Score a completed quiz and return the recommended plan.

    Raises:
        HTTPException 422: if an answer is not an offered option or the
            quiz is incomplete
    """
    session = QuizSession()
    try:
        for answer in request.answers:
            session.answer(answer)
    except DataValidationError as e:
        raise HTTPException(status_code=422, detail=str(e)) from e
    if not session.complete:
        raise HTTPException(
            status_code=422,
            detail=f"Expected {len(QUIZ_QUESTIONS)} answers, got {len(request.answers)}",
        )

    return QuizResultResponse(
        recommended_plan=recommend_plan(session.answers).value,
        plans=[PlanPriceModel(**p.to_dict()) for p in price_all_plans(request.billing)],
    )


@router.get("/plans", response_model=list[PlanPriceModel])
def list_plans(billing: BillingPeriod = BillingPeriod.MONTHLY) -> list[PlanPriceModel]:
    """Get every plan priced for the billing period."""
    return [PlanPriceModel(**p.to_dict()) for p in price_all_plans(billing)]
