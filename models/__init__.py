from .base import Base
from .users import User
from .friendships import Friendship
from .messages import Message
