# eventcal/bot.py - Telegram front end: month keyboard, day listing, event lookup
import logging
from datetime import datetime

from telegram import Update, InlineKeyboardButton, InlineKeyboardMarkup
from telegram.ext import ApplicationBuilder, CommandHandler, ContextTypes, CallbackQueryHandler

from eventcal.db import EventStore, close_pool
from eventcal.errors import InvalidDateError
from eventcal.loader import MAX_EVENT_ID
from eventcal.render import build_month_keyboard, render_day_text
from eventcal.service import build_calendar, load_event
from eventcal.settings import BOT_TOKEN, LOG_LEVEL
from eventcal.utils import parse_yyyy_mm_dd

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

PREFIX = 'cal'

store = EventStore()


def to_markup(kb_struct):
    keyboard = [[InlineKeyboardButton(cell['text'], callback_data=cell['callback_data']) for cell in row] for row in kb_struct]
    return InlineKeyboardMarkup(keyboard)


async def start(update: Update, context: ContextTypes.DEFAULT_TYPE):
    await update.message.reply_text(
        "Event calendar.\nCommands:\n/calendar [YYYY-MM-DD] - show a month\n/event <id> - show one event"
    )

async def calendar_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE):
    reference = context.args[0] if context.args else datetime.now().strftime('%Y-%m-%d')
    try:
        grid = await build_calendar(store, reference)
        markup = to_markup(build_month_keyboard(grid, PREFIX))
    except InvalidDateError:
        await update.message.reply_text('Use /calendar YYYY-MM-DD')
        return
    except Exception:
        logger.exception('calendar_cmd')
        await update.message.reply_text('Sorry, the calendar is unavailable right now.')
        return
    await update.message.reply_text(grid.label, reply_markup=markup)

async def event_cmd(update: Update, context: ContextTypes.DEFAULT_TYPE):
    try:
        event_id = int(context.args[0])
    except (IndexError, ValueError):
        await update.message.reply_text('Use /event <id>')
        return
    if not 1 <= event_id <= MAX_EVENT_ID:
        await update.message.reply_text('Event not found.')
        return
    try:
        event = await load_event(store, event_id)
    except Exception:
        logger.exception('event_cmd')
        await update.message.reply_text('Sorry, the event could not be loaded.')
        return
    if event is None:
        await update.message.reply_text('Event not found.')
        return
    text = f"{event.title}\n{event.start:%Y-%m-%d %H:%M} - {event.end:%Y-%m-%d %H:%M}"
    if event.description:
        text += f"\n\n{event.description}"
    await update.message.reply_text(text)

# Calendar callbacks
async def calendar_callback(update: Update, context: ContextTypes.DEFAULT_TYPE):
    query = update.callback_query
    await query.answer()
    try:
        _, action, value = query.data.split(':')
        if action == 'month':
            grid = await build_calendar(store, f"{value}-01")
            await query.edit_message_text(grid.label, reply_markup=to_markup(build_month_keyboard(grid, PREFIX)))
            return
        if action == 'day':
            sel_date = parse_yyyy_mm_dd(value)
            if sel_date is None:
                await query.message.reply_text('Unknown day.')
                return
            grid = await build_calendar(store, sel_date)
            slot = grid.days[sel_date.day - 1]
            await query.message.reply_text(render_day_text(slot, grid.year, grid.month))
    except Exception:
        logger.exception('calendar_callback')
        await query.message.reply_text('Calendar error. Try /calendar again.')

async def shutdown(application):
    await close_pool()

def main():
    application = ApplicationBuilder().token(BOT_TOKEN).post_shutdown(shutdown).build()
    application.add_handler(CommandHandler('start', start))
    application.add_handler(CommandHandler('calendar', calendar_cmd))
    application.add_handler(CommandHandler('event', event_cmd))
    application.add_handler(CallbackQueryHandler(calendar_callback, pattern=f'^{PREFIX}:(month|day):'))

    logger.info('Starting bot...')
    application.run_polling()

if __name__ == '__main__':
    main()
