import logging

# Records are only emitted once UVS_DEBUG configures a handler.
logging.getLogger(__name__).addHandler(logging.NullHandler())
