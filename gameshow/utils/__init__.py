from gameshow.utils import blocks
from gameshow.utils import conf
from gameshow.utils import exceptions
from gameshow.utils import firestore
from gameshow.utils import jsons
from gameshow.utils import messages
from gameshow.utils import pubsub
from gameshow.utils import slack
from gameshow.utils import tasks
from gameshow.utils import users
