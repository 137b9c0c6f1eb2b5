# ui/main_app.py
import gi

gi.require_version("Gtk", "4.0")
from gi.repository import Gtk

from stonego.game import Game
from stonego.settings import BOARD_SIZE, WINDOW_HEIGHT, WINDOW_WIDTH
from ui.board_view import BoardView
from ui.controller import GameController


class MainWindow(Gtk.ApplicationWindow):
    def __init__(self, app, board_size: int = BOARD_SIZE):
        super().__init__(application=app, title="stonego")
        self.set_default_size(WINDOW_WIDTH, WINDOW_HEIGHT)

        self.board_view = BoardView(board_size=board_size)
        self.status_label = Gtk.Label(label="")
        reset_button = Gtk.Button(label="Reset")

        self.controller = GameController(self.board_view, Game(size=board_size), self.status_label.set_text)
        reset_button.connect("clicked", lambda _btn: self.controller.reset())

        top = Gtk.Box(orientation=Gtk.Orientation.HORIZONTAL, spacing=12)
        top.set_margin_top(6)
        top.set_margin_start(6)
        top.set_margin_end(6)
        top.append(self.status_label)
        top.append(reset_button)

        vbox = Gtk.Box(orientation=Gtk.Orientation.VERTICAL)
        vbox.append(top)
        vbox.append(self.board_view)
        self.set_child(vbox)


class App(Gtk.Application):
    def __init__(self):
        super().__init__(application_id="org.stonego.app")

    def do_activate(self):
        win = MainWindow(self)
        win.present()


def main():
    app = App()
    return app.run(None)


if __name__ == "__main__":
    raise SystemExit(main())
