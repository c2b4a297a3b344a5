from homeledger.resolvers.auth import AuthResolvers
from homeledger.resolvers.mortgage import MortgageResolvers
from homeledger.resolvers.properties import PropertyResolvers

__all__ = ["AuthResolvers", "MortgageResolvers", "PropertyResolvers"]
