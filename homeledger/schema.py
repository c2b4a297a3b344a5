"""
GraphQL schema for the HomeLedger API.

Types mirror the records the resolvers return; each field resolver only
marshals arguments, hands the blocking work to the matching resolver group
from the request context and converts the result.

Operations:
    Query.calculateMortgage - Monthly payment for a loan (inputs are recorded)
    Query.getUserProperties - Properties owned by a user
    Mutation.signUp - Register and receive a token
    Mutation.logIn - Authenticate and receive a token
    Mutation.saveMortgageCalculation - Record calculation inputs for a user
    Mutation.addRealEstateProperty - Record a property for a user
"""

from typing import List, Optional

import strawberry
from starlette.concurrency import run_in_threadpool
from strawberry.types import Info

from homeledger.models import mortgage as mortgage_models
from homeledger.models import property as property_models


@strawberry.type
class MortgageCalculation:
    monthly_payment: Optional[float] = None
    property_value: Optional[float] = None

    @classmethod
    def from_record(cls, record: mortgage_models.MortgageCalculationRecord) -> "MortgageCalculation":
        # Saved calculations carry inputs only; no payment is computed for them.
        return cls(monthly_payment=None, property_value=record.property_value)


@strawberry.type
class RealEstateProperty:
    property_address: Optional[str] = None
    purchase_price: Optional[float] = None
    purchase_date: Optional[str] = None
    original_loan_amount: Optional[float] = None
    current_loan_amount: Optional[float] = None
    interest_rate: Optional[float] = None
    home_type: Optional[str] = None

    @classmethod
    def from_record(cls, record: property_models.RealEstateProperty) -> "RealEstateProperty":
        return cls(
            property_address=record.property_address,
            purchase_price=record.purchase_price,
            purchase_date=record.purchase_date.isoformat() if record.purchase_date else None,
            original_loan_amount=record.original_loan_amount,
            current_loan_amount=record.current_loan_amount,
            interest_rate=record.interest_rate,
            home_type=record.home_type,
        )


@strawberry.type
class Query:

    @strawberry.field
    async def calculate_mortgage(
        self,
        info: Info,
        loan_amount: float,
        interest_rate: float,
        term: int,
        property_value: float,
    ) -> Optional[MortgageCalculation]:
        quote = await run_in_threadpool(
            info.context["mortgage"].calculate_mortgage,
            loan_amount, interest_rate, term, property_value,
        )
        return MortgageCalculation(
            monthly_payment=quote.monthly_payment,
            property_value=quote.property_value,
        )

    @strawberry.field
    async def get_user_properties(self, info: Info, user_id: str) -> Optional[List[RealEstateProperty]]:
        records = await run_in_threadpool(info.context["properties"].get_user_properties, user_id)
        return [RealEstateProperty.from_record(record) for record in records]


@strawberry.type
class Mutation:

    @strawberry.mutation
    async def sign_up(self, info: Info, username: str, password: str) -> Optional[str]:
        return await run_in_threadpool(info.context["auth"].sign_up, username, password)

    @strawberry.mutation
    async def log_in(self, info: Info, username: str, password: str) -> Optional[str]:
        return await run_in_threadpool(info.context["auth"].log_in, username, password)

    @strawberry.mutation
    async def save_mortgage_calculation(
        self,
        info: Info,
        user_id: str,
        loan_amount: float,
        interest_rate: float,
        term: int,
        property_value: float,
    ) -> Optional[MortgageCalculation]:
        record = await run_in_threadpool(
            info.context["mortgage"].save_mortgage_calculation,
            user_id, loan_amount, interest_rate, term, property_value,
        )
        return MortgageCalculation.from_record(record)

    @strawberry.mutation
    async def add_real_estate_property(
        self,
        info: Info,
        user_id: str,
        property_address: str,
        purchase_price: float,
        purchase_date: str,
        original_loan_amount: float,
        current_loan_amount: float,
        interest_rate: float,
        home_type: str,
    ) -> Optional[RealEstateProperty]:
        record = await run_in_threadpool(
            info.context["properties"].add_real_estate_property,
            user_id,
            property_address,
            purchase_price,
            purchase_date,
            original_loan_amount,
            current_loan_amount,
            interest_rate,
            home_type,
        )
        return RealEstateProperty.from_record(record)


schema = strawberry.Schema(query=Query, mutation=Mutation)
