"""Telegram bot interface for Hazel.

Runs alongside the console loop in a background thread, sharing the same
router (and so the same command registry and handlers).

Requires telegram_credentials.py with TELEGRAM_TOKEN from @BotFather.
If not configured, start_telegram() logs a message and returns without error.
"""

import threading
import asyncio
from telegram import Update
from telegram.ext import ApplicationBuilder, MessageHandler, filters, ContextTypes


def _log(msg):
    print(msg, flush=True)


async def _handle_message(update: Update, context: ContextTypes.DEFAULT_TYPE):
    """Handle an incoming Telegram message."""
    text = update.message.text
    if not text:
        return

    user = update.message.from_user
    username = user.first_name or user.username or "unknown"
    source = f"[Telegram:{username}]"

    _log(f"  {source} \"{text}\"")

    router = context.bot_data["router"]
    response, ex = router.dispatch(text, source=source)

    if response is None:
        _log("  (no command)")
        return

    _log(f"  Response: \"{response}\"")
    await update.message.reply_text(response)


async def _run_bot_async(token, router):
    """Run the Telegram bot polling loop (async)."""
    app = ApplicationBuilder().token(token).build()
    app.bot_data["router"] = router
    app.add_handler(MessageHandler(filters.TEXT & ~filters.COMMAND, _handle_message))

    await app.initialize()
    await app.updater.start_polling(drop_pending_updates=True)
    await app.start()
    print("Telegram bot started.", flush=True)

    # Block forever (until thread is killed as daemon)
    stop_event = asyncio.Event()
    await stop_event.wait()


def _run_bot(token, router):
    """Run the Telegram bot (blocking). Meant to be called in a thread."""
    loop = asyncio.new_event_loop()
    asyncio.set_event_loop(loop)
    loop.run_until_complete(_run_bot_async(token, router))


def start_telegram(router):
    """Start the Telegram bot in a background daemon thread.

    Returns True if started, False if skipped (no token).
    """
    try:
        from hazel.telegram_credentials import TELEGRAM_TOKEN as token
    except ImportError:
        print("No telegram_credentials.py, Telegram disabled.", flush=True)
        return False

    t = threading.Thread(target=_run_bot, args=(token, router), daemon=True)
    t.start()
    return True
