"""
Tests for real estate property tracking.

Tests adding properties, listing them per user and error translation.
"""

from concurrent.futures import ThreadPoolExecutor
from datetime import datetime

import pytest
from sqlalchemy.exc import OperationalError

from homeledger.db import Store, init_db, make_engine, make_sessionmaker
from homeledger.exceptions import PropertyLookupError
from homeledger.models.user import User
from homeledger.resolvers.mortgage import MortgageResolvers
from homeledger.resolvers.properties import PropertyResolvers, parse_purchase_date

ADD_PROPERTY = """
mutation Add(
  $userId: String!, $propertyAddress: String!, $purchasePrice: Float!, $purchaseDate: String!,
  $originalLoanAmount: Float!, $currentLoanAmount: Float!, $interestRate: Float!, $homeType: String!
) {
  addRealEstateProperty(
    userId: $userId, propertyAddress: $propertyAddress, purchasePrice: $purchasePrice,
    purchaseDate: $purchaseDate, originalLoanAmount: $originalLoanAmount,
    currentLoanAmount: $currentLoanAmount, interestRate: $interestRate, homeType: $homeType
  ) {
    propertyAddress
    purchasePrice
    purchaseDate
    originalLoanAmount
    currentLoanAmount
    interestRate
    homeType
  }
}
"""

GET_PROPERTIES = """
query Properties($userId: String!) {
  getUserProperties(userId: $userId) {
    propertyAddress
    homeType
  }
}
"""


def property_args(user_id: str, address: str = "12 Elm Street") -> dict:
    return {
        "userId": user_id,
        "propertyAddress": address,
        "purchasePrice": 350000,
        "purchaseDate": "2021-06-15",
        "originalLoanAmount": 300000,
        "currentLoanAmount": 280000,
        "interestRate": 3.25,
        "homeType": "Single Family",
    }


class TestPurchaseDate:
    """Test suite for purchase date parsing."""

    def test_plain_date(self):
        assert parse_purchase_date("2021-06-15") == datetime(2021, 6, 15)

    def test_utc_datetime_is_made_naive(self):
        assert parse_purchase_date("2021-06-15T12:30:00Z") == datetime(2021, 6, 15, 12, 30)

    def test_offset_is_normalised_to_utc(self):
        assert parse_purchase_date("2021-06-15T12:30:00+02:00") == datetime(2021, 6, 15, 10, 30)

    def test_garbage_is_rejected(self):
        with pytest.raises(ValueError):
            parse_purchase_date("last tuesday")


class TestPropertyResolvers:
    """Test suite for the resolver group, without the API layer."""

    def test_add_links_property_to_user(self, store: Store, test_user: User):
        resolvers = PropertyResolvers(store.properties, store.users)
        prop = resolvers.add_real_estate_property(
            test_user.id, "12 Elm Street", 350000, "2021-06-15", 300000, 280000, 3.25, "Condo",
        )
        assert prop.user_id == test_user.id
        assert store.users.get(test_user.id).real_estate_properties == [prop.id]

    def test_add_for_unknown_user_is_kept(self, store: Store):
        resolvers = PropertyResolvers(store.properties, store.users)
        prop = resolvers.add_real_estate_property(
            "a" * 24, "1 Nowhere Road", 1, "2020-01-01", 1, 1, 1, "Lot",
        )
        assert [p.id for p in store.properties.find_by_user("a" * 24)] == [prop.id]

    def test_store_failure_is_translated(self, store: Store, monkeypatch):
        def broken(user_id):
            raise OperationalError("SELECT", {}, Exception("database is locked"))

        monkeypatch.setattr(store.properties, "find_by_user", broken)
        resolvers = PropertyResolvers(store.properties, store.users)
        with pytest.raises(PropertyLookupError, match="Error fetching user properties"):
            resolvers.get_user_properties("anyone")


class TestPropertyApi:
    """Test suite for the property GraphQL operations."""

    def test_add_real_estate_property(self, graphql, store: Store, test_user: User):
        body = graphql(ADD_PROPERTY, property_args(test_user.id))
        assert "errors" not in body
        assert body["data"]["addRealEstateProperty"] == {
            "propertyAddress": "12 Elm Street",
            "purchasePrice": 350000,
            "purchaseDate": "2021-06-15T00:00:00",
            "originalLoanAmount": 300000,
            "currentLoanAmount": 280000,
            "interestRate": 3.25,
            "homeType": "Single Family",
        }
        assert len(store.users.get(test_user.id).real_estate_properties) == 1

    def test_get_user_properties_includes_new_property(self, graphql, test_user: User):
        graphql(ADD_PROPERTY, property_args(test_user.id))
        body = graphql(GET_PROPERTIES, {"userId": test_user.id})
        assert body["data"]["getUserProperties"] == [
            {"propertyAddress": "12 Elm Street", "homeType": "Single Family"},
        ]

    def test_get_user_properties_is_per_user(self, graphql, test_user: User, other_user: User):
        graphql(ADD_PROPERTY, property_args(test_user.id, "12 Elm Street"))
        graphql(ADD_PROPERTY, property_args(other_user.id, "99 Oak Avenue"))

        mine = graphql(GET_PROPERTIES, {"userId": test_user.id})["data"]["getUserProperties"]
        theirs = graphql(GET_PROPERTIES, {"userId": other_user.id})["data"]["getUserProperties"]
        assert [p["propertyAddress"] for p in mine] == ["12 Elm Street"]
        assert [p["propertyAddress"] for p in theirs] == ["99 Oak Avenue"]

    def test_get_user_properties_empty(self, graphql, test_user: User):
        body = graphql(GET_PROPERTIES, {"userId": test_user.id})
        assert "errors" not in body
        assert body["data"]["getUserProperties"] == []

    def test_invalid_purchase_date_fails(self, graphql, store: Store, test_user: User):
        args = property_args(test_user.id)
        args["purchaseDate"] = "not a date"
        body = graphql(ADD_PROPERTY, args)
        assert body["data"]["addRealEstateProperty"] is None
        assert body["errors"]
        assert store.properties.find_by_user(test_user.id) == []

    def test_get_user_properties_store_error(self, graphql, store: Store, monkeypatch):
        def broken(user_id):
            raise OperationalError("SELECT", {}, Exception("connection reset"))

        monkeypatch.setattr(store.properties, "find_by_user", broken)
        body = graphql(GET_PROPERTIES, {"userId": "anyone"})
        assert body["data"]["getUserProperties"] is None
        assert body["errors"][0]["message"] == "Error fetching user properties"


class TestConcurrentOwnership:
    """Back-references must survive simultaneous appends for one user."""

    @pytest.fixture
    def file_store(self, tmp_path) -> Store:
        # Separate connections per thread, as in a deployed server.
        engine = make_engine(f"sqlite:///{tmp_path / 'ledger.db'}")
        init_db(engine)
        try:
            yield Store(make_sessionmaker(engine))
        finally:
            engine.dispose()

    def test_parallel_property_adds_keep_every_reference(self, file_store: Store):
        owner = file_store.users.create("owner", "secret")
        resolvers = PropertyResolvers(file_store.properties, file_store.users)

        def add(n: int):
            return resolvers.add_real_estate_property(
                owner.id, f"{n} Parallel Street", 1000.0 * n, "2022-03-01", 900.0, 800.0, 4.0, "Condo",
            ).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(add, range(8)))

        refs = file_store.users.get(owner.id).real_estate_properties
        assert len(refs) == 8
        assert set(refs) == set(created)

    def test_parallel_calculation_saves_keep_every_reference(self, file_store: Store):
        owner = file_store.users.create("owner", "secret")
        resolvers = MortgageResolvers(file_store.calculations, file_store.users)

        def save(n: int):
            return resolvers.save_mortgage_calculation(owner.id, 100000.0 + n, 5.0, 30, 200000.0).id

        with ThreadPoolExecutor(max_workers=8) as pool:
            created = list(pool.map(save, range(8)))

        refs = file_store.users.get(owner.id).mortgage_calculations
        assert sorted(refs) == sorted(created)
