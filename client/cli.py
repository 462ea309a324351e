"""Interactive terminal front end for the meal planner.

Each input line is turned into one controller action; the screen is
re-rendered from the state after every action.
"""

import argparse
import shlex
from typing import Optional

from client.api import MealPlannerClient
from client.state import ALL_DAYS, DAYS, FORM_FIELDS, PlannerController
from client.view import render
from core.config import API_BASE_URL

HELP = """Commands:
  set <field> <text>   fill a form field (day, breakfast, lunch, dinner, snacks, notes)
  save                 add the meal plan, or update the one being edited
  edit <day>           load a day's plan into the form
  cancel               clear the form / close the dialog
  delete <day>         delete a day's plan (asks for confirmation)
  clear                clear the entire week (asks for confirmation)
  yes | no             answer the confirmation dialog
  filter <day|All>     show a single day or all days
  reload               fetch the list again
  dismiss              hide the error message
  quit                 leave"""


def resolve_day(text: str) -> Optional[str]:
    """Match a full or abbreviated weekday name, ignoring case."""
    text = text.strip().lower()
    if not text:
        return None
    for day in DAYS:
        if day.lower() == text or (len(text) >= 3 and day.lower().startswith(text)):
            return day
    return None


def _meal_for(controller: PlannerController, day_text: str):
    day = resolve_day(day_text)
    return next((m for m in controller.state.meals if m.get("day") == day), None)


def handle_command(controller: PlannerController, line: str) -> bool:
    """Apply one command line. Returns False when the user asked to quit."""
    try:
        parts = shlex.split(line)
    except ValueError as exc:
        print(f"Could not parse command: {exc}")
        return True
    if not parts:
        return True

    command, args = parts[0].lower(), parts[1:]
    if command in ("quit", "exit"):
        return False
    if command == "help":
        print(HELP)
    elif command == "set" and args:
        name = args[0].lower()
        if name not in FORM_FIELDS:
            print(f"Unknown field '{args[0]}'")
            return True
        value = " ".join(args[1:])
        if name == "day":
            value = resolve_day(value) or value
        controller.change_field(name, value)
    elif command == "save":
        controller.submit()
    elif command == "edit" and args:
        meal = _meal_for(controller, args[0])
        if meal is None:
            print(f"No meal plan for '{args[0]}'")
        else:
            controller.start_edit(meal)
    elif command == "cancel" or command == "no":
        controller.cancel()
    elif command == "delete" and args:
        meal = _meal_for(controller, args[0])
        if meal is None:
            print(f"No meal plan for '{args[0]}'")
        else:
            controller.request_delete(meal)
    elif command == "clear":
        controller.request_clear_week()
    elif command == "yes":
        controller.confirm()
    elif command == "filter" and args:
        day = ALL_DAYS if args[0].lower() == "all" else resolve_day(args[0])
        if day is None:
            print(f"Unknown day '{args[0]}'")
        else:
            controller.set_filter(day)
    elif command == "reload":
        controller.load()
    elif command == "dismiss":
        controller.dismiss_error()
    else:
        print("Unknown command; type 'help'.")
    return True


def main(argv=None) -> None:
    parser = argparse.ArgumentParser("meal-planner", description="Plan your meals for the week")
    parser.add_argument("--api-url", default=API_BASE_URL, help="API base URL (default: %(default)s)")
    args = parser.parse_args(argv)

    with MealPlannerClient(args.api_url) as api:
        controller = PlannerController(api)
        controller.load()
        print(render(controller.state))
        print(HELP)
        while True:
            try:
                line = input("> ")
            except (EOFError, KeyboardInterrupt):
                print()
                break
            if not handle_command(controller, line):
                break
            print(render(controller.state))


if __name__ == "__main__":
    main()
