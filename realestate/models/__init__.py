"""Database models."""

from realestate.models.agent import Agent
from realestate.models.associations import PropertyAgent, PropertyClient
from realestate.models.client import Client
from realestate.models.property import Property

__all__ = ["Property", "Agent", "Client", "PropertyAgent", "PropertyClient"]
