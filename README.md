# announce

`announce` posts scheduled announcements to chat spaces through incoming webhooks.

It runs three jobs:

- **Uniform reminder**, every Thursday at 05:00 local time. It works out which Thursday of the month it is and says whether today's uniform is black (`HITAM`, odd Thursdays) or white (`PUTIH`, even Thursdays).
- **Attendance prompt**, every day at 09:10. It picks at random a quote, joke, riddle, trivia question, piece of advice or fun fact, fetches it from a text API, and posts it as a card with an "Absence Here" button that links to your attendance page. If the fetch fails, the card says "No Words Today".
- **Progress reminder**, every day at 09:00. It posts a plain-text reminder to a second space.

## Installation

```
pip install .
```

To install the test dependencies as well:

```
pip install ".[test]"
```

## Configuration

Settings are read from a dotenv file, `.env` in the working directory unless another path is given. The file must exist. Values already set in the process environment take precedence over those in the file. Every variable below must be present and non-empty; if one is missing, `announce.env.MissingEnvError` is raised and the program stops at start-up.

| Variable | Meaning |
| --- | --- |
| `MODE` | `test` runs every job on a fixed interval; any other value uses the weekly and daily schedule |
| `SPACE_NOTIF` | webhook URL for the uniform and attendance cards |
| `GRC_NOTIF` | webhook URL for the progress reminder |
| `TIME_SCHEDULE_NOTIF` | interval in seconds used when `MODE=test`; a value that is not a positive integer leaves the jobs unscheduled (the error is logged) |
| `NINJA_API_BASE_URL` | base URL of the text API |
| `NINJA_API_KEY` | API key, sent as `X-Api-Key` |
| `NINJA_API_QUOTES_URL` | path for quotes |
| `NINJA_API_JOKES_URL` | path for jokes |
| `NINJA_API_RIDDLE_URL` | path for riddles |
| `NINJA_API_TRIVIA_URL` | path for trivia |
| `NINJA_API_ADVICE_URL` | path for advice |
| `NINJA_API_FACT_URL` | path for facts |
| `KY_ATTENDANCE_URL` | link behind the attendance card's button |

Set `LOG_LEVEL=DEBUG` to log each variable as it is loaded.

An example `.env`:

```
MODE=test
SPACE_NOTIF=https://chat.example.com/webhook/space
GRC_NOTIF=https://chat.example.com/webhook/grc
TIME_SCHEDULE_NOTIF=60
NINJA_API_BASE_URL=https://api.example.com/v1
NINJA_API_KEY=placeholder
NINJA_API_QUOTES_URL=/quotes
NINJA_API_JOKES_URL=/jokes
NINJA_API_RIDDLE_URL=/riddles
NINJA_API_TRIVIA_URL=/trivia
NINJA_API_ADVICE_URL=/advice
NINJA_API_FACT_URL=/facts
KY_ATTENDANCE_URL=https://attendance.example.com
```

## Running

```
announce
announce --env-file /path/to/settings.env
```

The scheduler runs in a background thread until the process receives an interrupt (Ctrl+C) or `SIGTERM`, then shuts down. A job that raises is logged and does not stop the others. A webhook reply with a non-2xx status is logged, not treated as a failure.

Log lines go to standard output in the form `[time] [CATEGORY] [LEVEL] message`, for example:

```
[2024/05/02 09:10:00] [SERVICE] [INFO] Random text type: Jokes
```

## Using it as a library

```python
from announce.config import load_config
from announce.reminders import grc, notif
from announce.attendance import handle_attendance

config = load_config(".env")
grc(config)                 # post the progress reminder now
notif(config, None)         # post today's uniform reminder
handle_attendance(config, None)
```

Other pieces that can be used on their own:

- `announce.notify.create_card(flag, msg)` and `create_card_with_button(flag, msg, attendance_url)` build the card documents; `send_to_space(config, notif_type, flag, msg)` posts one.
- `announce.attendance.fetch_words(config, text_type)` fetches a single text of a given `announce.constants.TextType` and raises `WordsError` on failure.
- `announce.reminders.week_number_in_month(date)` and `uniform_colour(thursday_number)` give the Thursday number and the uniform colour.
- `announce.scheduler.build_scheduler(config)` returns a `Scheduler` with the three jobs registered. Call `start()` on it to begin and `shutdown()` to stop, or drive it yourself with `run_pending(now)`. `IntervalTrigger`, `DailyTrigger` and `WeeklyTrigger` can be passed to `Scheduler.add_job(trigger, task)` for other jobs.

## What it does not do

The scheduler keeps no state on disk: runs missed while the program was not running are not made up later, and nothing records which announcements were sent. Announcements are only posted; replies in the chat spaces are not read.