from flask_smorest import Blueprint as BaseBlueprint
from webargs.flaskparser import FlaskParser


class Parser(FlaskParser):
    # Rejected arguments are reported as bad requests
    DEFAULT_VALIDATION_STATUS = 400


class Blueprint(BaseBlueprint):
    ARGUMENTS_PARSER = Parser()
