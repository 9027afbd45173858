"""Sleeping barber simulation: a bounded waiting room shared by barber and client threads."""

from barbershop.actors import Barber, BarberState, Client, ClientState
from barbershop.config import ShopConfig, validate_shop_config
from barbershop.dispatcher import Dispatcher
from barbershop.errors import Cancelled, InvalidConfiguration
from barbershop.room import RoomSnapshot, WaitingRoom

__all__ = [
    "Barber",
    "BarberState",
    "Cancelled",
    "Client",
    "ClientState",
    "Dispatcher",
    "InvalidConfiguration",
    "RoomSnapshot",
    "ShopConfig",
    "WaitingRoom",
    "validate_shop_config",
]
