"""Onboarding quiz and subscription plan pricing.

The quiz asks five multiple-choice questions; the answer about the monthly
amount picks the recommended plan. Plans are priced monthly or annually.
"""

import math
from dataclasses import dataclass, field
from enum import Enum

from advisor_api.domain.exceptions import DataValidationError


class PlanTier(str, Enum):
    """Subscription plan identifiers."""

    BASIC = "basic"
    PRO = "pro"
    PREMIUM = "premium"


class BillingPeriod(str, Enum):
    """How a plan is billed."""

    MONTHLY = "monthly"
    ANNUAL = "annual"


# ============================================================================
# Quiz
# ============================================================================


@dataclass(frozen=True)
class QuizQuestion:
    """A multiple-choice onboarding question."""

    question: str
    options: tuple[str, ...]

    def to_dict(self) -> dict:
        return {"question": self.question, "options": list(self.options)}


QUIZ_QUESTIONS: tuple[QuizQuestion, ...] = (
    QuizQuestion(
        "What is your level of experience with investing?",
        (
            "Beginner - I have never invested",
            "Intermediate - I have invested a few times",
            "Advanced - I invest regularly",
            "Expert - I work in the field",
        ),
    ),
    QuizQuestion(
        "What is your main investment goal?",
        (
            "Keep my money safe",
            "Moderate growth of my wealth",
            "Maximize long-term returns",
            "Generate monthly passive income",
        ),
    ),
    QuizQuestion(
        "How much do you plan to invest each month?",
        (
            "Up to R$ 500",
            "R$ 500 - R$ 2.000",
            "R$ 2.000 - R$ 5.000",
            "Above R$ 5.000",
        ),
    ),
    QuizQuestion(
        "What is your risk profile?",
        (
            "Conservative - I prefer safety",
            "Moderate - I accept some risk",
            "Bold - I look for high returns",
            "Aggressive - I accept high volatility",
        ),
    ),
    QuizQuestion(
        "What is your investment horizon?",
        (
            "Short term (up to 1 year)",
            "Medium term (1-3 years)",
            "Long term (3-5 years)",
            "Very long term (5+ years)",
        ),
    ),
)

# Index of the question whose answer drives the plan recommendation
MONTHLY_AMOUNT_QUESTION = 2


@dataclass
class QuizAnswer:
    question: str
    answer: str

    def to_dict(self) -> dict:
        return {"question": self.question, "answer": self.answer}


@dataclass
class QuizSession:
    """Steps through QUIZ_QUESTIONS one answer at a time."""

    questions: tuple[QuizQuestion, ...] = QUIZ_QUESTIONS
    answers: list[QuizAnswer] = field(default_factory=list)

    @property
    def current_index(self) -> int:
        return len(self.answers)

    @property
    def complete(self) -> bool:
        return len(self.answers) >= len(self.questions)

    @property
    def current_question(self) -> QuizQuestion | None:
        """The question awaiting an answer, or None once complete."""
        if self.complete:
            return None
        return self.questions[self.current_index]

    def answer(self, option: str) -> None:
        """Record the answer to the current question and advance.

        Raises:
            DataValidationError: if the quiz is complete or the option is
                not offered by the current question
        """
        question = self.current_question
        if question is None:
            raise DataValidationError("Quiz is already complete", field="answer", value=option)
        if option not in question.options:
            raise DataValidationError(
                f"'{option}' is not an option for: {question.question}",
                field="answer",
                value=option,
            )
        self.answers.append(QuizAnswer(question=question.question, answer=option))


def recommend_plan(answers: list[QuizAnswer] | list[str]) -> PlanTier:
    """Recommend a plan from the monthly amount answer.

    Amounts reaching R$ 5.000 get premium, amounts reaching R$ 2.000 get
    pro, anything else (including a missing answer) gets basic.
    """
    if len(answers) <= MONTHLY_AMOUNT_QUESTION:
        return PlanTier.BASIC
    answer = answers[MONTHLY_AMOUNT_QUESTION]
    text = answer.answer if isinstance(answer, QuizAnswer) else str(answer)

    if "5.000" in text:
        return PlanTier.PREMIUM
    elif "2.000" in text:
        return PlanTier.PRO
    return PlanTier.BASIC


# ============================================================================
# Plans
# ============================================================================


@dataclass(frozen=True)
class Plan:
    """A subscription plan; prices in BRL."""

    tier: PlanTier
    name: str
    monthly_price: int
    annual_price: int
    features: tuple[str, ...]
    popular: bool = False


PLANS: dict[PlanTier, Plan] = {
    PlanTier.BASIC: Plan(
        tier=PlanTier.BASIC,
        name="Basic Plan",
        monthly_price=47,
        annual_price=470,
        features=(
            "Personalized AI analysis",
            "Daily recommendations",
            "Email support",
            "Access to 50+ assets",
            "Full dashboard",
        ),
    ),
    PlanTier.PRO: Plan(
        tier=PlanTier.PRO,
        name="Pro Plan",
        monthly_price=97,
        annual_price=970,
        popular=True,
        features=(
            "Everything in Basic",
            "Real-time analysis",
            "Custom alerts",
            "Priority support",
            "Access to 200+ assets",
            "Advanced reports",
            "Integration API",
        ),
    ),
    PlanTier.PREMIUM: Plan(
        tier=PlanTier.PREMIUM,
        name="Premium Plan",
        monthly_price=197,
        annual_price=1970,
        features=(
            "Everything in Pro",
            "1-on-1 consulting",
            "Unlimited portfolio analysis",
            "24/7 support",
            "Access to all assets",
            "Exclusive strategies",
            "VIP investor group",
        ),
    ),
}


@dataclass
class PlanPrice:
    """A plan's price for one billing period."""

    plan: Plan
    billing: BillingPeriod
    monthly_equivalent: int
    annual_total: int | None = None
    savings_pct: int | None = None

    def to_dict(self) -> dict:
        return {
            "tier": self.plan.tier.value,
            "name": self.plan.name,
            "popular": self.plan.popular,
            "features": list(self.plan.features),
            "billing": self.billing.value,
            "price": f"R$ {self.monthly_equivalent}",
            "period": "/month",
            "annual": f"R$ {self.annual_total}/year" if self.annual_total is not None else None,
            "savings": f"Save {self.savings_pct}%" if self.savings_pct is not None else None,
        }


def _round_half_up(value: float) -> int:
    return math.floor(value + 0.5)


def price_plan(plan: Plan, billing: BillingPeriod) -> PlanPrice:
    """Price a plan for the billing period.

    Annual billing shows the monthly equivalent of the annual price and the
    saving relative to paying monthly.
    """
    if billing == BillingPeriod.MONTHLY:
        return PlanPrice(plan=plan, billing=billing, monthly_equivalent=plan.monthly_price)

    monthly_equivalent = _round_half_up(plan.annual_price / 12)
    savings = _round_half_up(
        (plan.monthly_price - monthly_equivalent) / plan.monthly_price * 100
    )
    return PlanPrice(
        plan=plan,
        billing=billing,
        monthly_equivalent=monthly_equivalent,
        annual_total=plan.annual_price,
        savings_pct=savings,
    )


def price_all_plans(billing: BillingPeriod) -> list[PlanPrice]:
    """Price every plan, basic first."""
    return [price_plan(plan, billing) for plan in PLANS.values()]
