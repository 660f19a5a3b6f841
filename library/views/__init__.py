from .home_view import *
from .log_in_view import *
from .log_out_view import *
