import logging

from telegram import InlineKeyboardButton, InlineKeyboardMarkup, LinkPreviewOptions, Update
from telegram.constants import ParseMode
from telegram.error import BadRequest
from telegram.ext import Application, CallbackQueryHandler, CommandHandler, ContextTypes

from .client import StockPage
from .config import Config
from .relay import start_relay
from .storage import JsonStore
from .timers import StockTimers
from .view import render_status, render_stock, render_timers

logger = logging.getLogger(__name__)

MENU_TEXT = "━━━━━ BLOX FRUITS ━━━━━\n\nChoose an option:"


class BloxFruitsBot:
    def __init__(self, config: Config):
        self.config = config
        self.timers = StockTimers(JsonStore(config.data_file))
        self.timers.restore()
        self.page = StockPage(config.relay_url)
        self.dark_mode = {}
        self.relay_runner = None
        self.tick_job = None
        self.load_task = None

    def is_dark(self, user_id):
        return self.dark_mode.get(str(user_id), False)

    def create_main_menu(self, user_id):
        theme_label = "☀️ Light mode" if self.is_dark(user_id) else "🌙 Dark mode"
        keyboard = [
            [InlineKeyboardButton("🟢 Normal Stock", callback_data="view_normal"),
             InlineKeyboardButton("🟣 Mirage Stock", callback_data="view_mirage")],
            [InlineKeyboardButton("⏱ Restock Timers", callback_data="view_timers")],
            [InlineKeyboardButton(theme_label, callback_data="toggle_theme"),
             InlineKeyboardButton("↻ Refresh", callback_data="refresh")],
        ]
        return InlineKeyboardMarkup(keyboard)

    def create_stock_view(self, kind, user_id):
        text = render_stock(
            self.page, kind,
            is_dark=self.is_dark(user_id),
            remaining_ms=self.timers.remaining(kind),
            asset_base_url=self.config.asset_base_url,
        )
        keyboard = [[InlineKeyboardButton("« Back", callback_data="main_menu"),
                     InlineKeyboardButton("↻ Update", callback_data=f"view_{kind}")]]
        return text, InlineKeyboardMarkup(keyboard)

    def create_timers_view(self):
        keyboard = [[InlineKeyboardButton("« Back", callback_data="main_menu"),
                     InlineKeyboardButton("↻ Update", callback_data="view_timers")]]
        return render_timers(self.timers), InlineKeyboardMarkup(keyboard)

    async def start(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        await update.message.reply_text(
            "Welcome to the Blox Fruits stock tracker! 🍎\n\n"
            "Features:\n"
            "• View normal and mirage stock\n"
            "• Restock countdowns\n"
            "• Light / dark theme\n\n"
            "Use /menu to begin!"
        )

    async def menu(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        await update.message.reply_text(
            MENU_TEXT,
            reply_markup=self.create_main_menu(update.effective_user.id)
        )

    async def status(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        await update.message.reply_text(render_status(self.page))

    async def reset_timers(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        """Admin command to restart both countdowns"""
        user_id = str(update.effective_user.id)
        if user_id != self.config.admin_id:
            await update.message.reply_text("⛔ Access denied")
            return

        self.timers.reset()
        logger.info("Timers reset by admin %s", user_id)
        await update.message.reply_text("✅ Timers reset\n\n" + render_timers(self.timers))

    async def button_handler(self, update: Update, context: ContextTypes.DEFAULT_TYPE):
        query = update.callback_query
        user_id = query.from_user.id
        await query.answer()

        if query.data == "main_menu":
            await self._edit(query, MENU_TEXT, self.create_main_menu(user_id))

        elif query.data in ("view_normal", "view_mirage"):
            text, markup = self.create_stock_view(query.data.split("_", 1)[1], user_id)
            await self._edit(query, text, markup, parse_mode=ParseMode.HTML)

        elif query.data == "view_timers":
            text, markup = self.create_timers_view()
            await self._edit(query, text, markup)

        elif query.data == "toggle_theme":
            self.dark_mode[str(user_id)] = not self.is_dark(user_id)
            await self._edit(query, MENU_TEXT, self.create_main_menu(user_id))

        elif query.data == "refresh":
            await self.page.load()
            await self._edit(query, MENU_TEXT + "\n\n" + render_status(self.page),
                             self.create_main_menu(user_id))

    async def _edit(self, query, text, markup, parse_mode=None):
        try:
            await query.edit_message_text(
                text, reply_markup=markup, parse_mode=parse_mode,
                link_preview_options=LinkPreviewOptions(is_disabled=True),
            )
        except BadRequest as e:
            # Telegram rejects edits that leave the message unchanged
            if "not modified" not in str(e).lower():
                raise

    async def tick_timers(self, context: ContextTypes.DEFAULT_TYPE):
        self.timers.tick_all()

    async def post_init(self, application: Application):
        self.relay_runner = await start_relay(
            self.config.relay_host, self.config.relay_port, self.config.upstream_url
        )
        self.tick_job = application.job_queue.run_repeating(
            self.tick_timers, interval=1, first=1, name="restock_timers"
        )
        self.load_task = application.create_task(self.page.load(), name="initial_stock_load")

    async def post_shutdown(self, application: Application):
        if self.load_task is not None and not self.load_task.done():
            self.load_task.cancel()
        self.load_task = None
        if self.tick_job is not None:
            self.tick_job.schedule_removal()
            self.tick_job = None
        if self.relay_runner is not None:
            await self.relay_runner.cleanup()
            self.relay_runner = None


def build_application(config: Config) -> Application:
    bot = BloxFruitsBot(config)
    application = (
        Application.builder()
        .token(config.token)
        .post_init(bot.post_init)
        .post_shutdown(bot.post_shutdown)
        .build()
    )

    application.add_handler(CommandHandler("start", bot.start))
    application.add_handler(CommandHandler("menu", bot.menu))
    application.add_handler(CommandHandler("status", bot.status))
    application.add_handler(CommandHandler("reset_timers", bot.reset_timers))
    application.add_handler(CallbackQueryHandler(bot.button_handler))
    return application


def main():
    logging.basicConfig(
        format='%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        level=logging.INFO
    )
    config = Config.from_env()
    build_application(config).run_polling()


if __name__ == '__main__':
    main()
