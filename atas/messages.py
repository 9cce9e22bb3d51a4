"""
User-facing strings. Templates use str.format with named fields.
"""

DIVIDER = "-" * 60

GREETING = "Hello! ATAS is ready. Type `help` to see what it can do."
GOODBYE = "Bye! Your tasks have been saved."

# Usage strings
EDIT_USAGE = "Edit Task: edit [TASK NUMBER]"
ASSIGNMENT_USAGE = "Add Assignment: assignment n/NAME m/MODULE d/DD/MM/YY HHMM c/COMMENTS"
EVENT_USAGE = "Add Event: event n/NAME l/LOCATION d/DD/MM/YY HHMM-HHMM c/COMMENTS"
LIST_USAGE = (
    "List Tasks: list [assignments | incomplete assignments | events | upcoming events"
    " | today | week | range DD/MM/YY DD/MM/YY]"
)
DONE_USAGE = "Mark Done: done [TASK NUMBER]"
DELETE_USAGE = "Delete Task: delete [TASK NUMBER]"
CLEAR_USAGE = "Clear Tasks: clear [all | done]"
REPEAT_USAGE = "Repeat Event: repeat [TASK NUMBER] p/[COUNT][d | w | m | y]"
EXIT_USAGE = "Exit: exit"

HELP_MESSAGE = "\n".join(
    [
        ASSIGNMENT_USAGE,
        EVENT_USAGE,
        LIST_USAGE,
        DONE_USAGE,
        DELETE_USAGE,
        CLEAR_USAGE,
        REPEAT_USAGE,
        EDIT_USAGE,
        EXIT_USAGE,
    ]
)

# Edit pipeline
NO_TASKS_MSG = "You have no tasks at the moment."
INVALID_ID_ERROR = "Error: Please provide a task number within the range of {valid_range}."
EDIT_PROMPT = "Enter the full details of the edited task (assignment or event):"
UNKNOWN_COMMAND_ERROR = "Error: Unknown command. Type `help` to see the list of commands."
INCORRECT_FORMAT_ERROR = "Error: Incorrect format for {task_type}. Use:\n{usage}"
DATE_INCORRECT_OR_INVALID_ERROR = (
    "Error: Incorrect or invalid date and time. Use DD/MM/YY HHMM."
)
START_END_DATE_INCORRECT_OR_INVALID_ERROR = (
    "Error: Incorrect or invalid start and end date and time. Use DD/MM/YY HHMM-HHMM."
)
INCORRECT_START_END_TIME_ERROR = "Error: The end time of an event must be after its start time."
SAME_TASK_ERROR = "Error: The same task already exists in your list."
EDIT_SUCCESS_MESSAGE = "Task edited:\n{task}"

# Other commands
ADD_SUCCESS_MESSAGE = "Task added:\n{task}\nYou now have {count} task(s) in your list."
DONE_SUCCESS_MESSAGE = "Marked as done:\n{task}"
DELETE_SUCCESS_MESSAGE = "Task deleted:\n{task}\nYou now have {count} task(s) in your list."
CLEAR_ALL_SUCCESS_MESSAGE = "All tasks have been cleared."
CLEAR_DONE_SUCCESS_MESSAGE = "Cleared {count} completed task(s)."
REPEAT_SUCCESS_MESSAGE = "Event set to repeat:\n{task}"
REPEAT_NOT_EVENT_ERROR = "Error: Only events can be set to repeat."
REPEAT_PERIOD_ERROR = "Error: The repeat period count must be a positive number."
NO_MATCHING_TASKS_MSG = "No matching tasks found."
INVALID_RANGE_ERROR = "Error: The start of the range must not be after its end."
