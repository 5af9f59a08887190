# plugins/greet.py
"""
Example user plugin.

Any module in ./plugins that defines `register(app)` is loaded at start-up,
even when internal commands are disabled.
"""
import cmd2
from cmd2 import Cmd2ArgumentParser, with_argparser, with_default_category

greet_parser = Cmd2ArgumentParser(description="Print a greeting")
greet_parser.add_argument("name", nargs="?", default="world", help="Who to greet")


@with_default_category("Plugin Commands")
class GreetCommandSet(cmd2.CommandSet):
    @with_argparser(greet_parser)
    def do_greet(self, args):
        self._cmd.poutput(f"Hello, {args.name}!")
        self._cmd.last_result = args.name


def register(app):
    app.register_command_set(GreetCommandSet())
