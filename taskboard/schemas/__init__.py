from .user import UserCreate, UserLogin, UserOut, UserBrief, UserUpdate, ProfileUpdate
from .tokens import Token, Message
from .task import TaskCreate, TaskUpdate, TaskOut
