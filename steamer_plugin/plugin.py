"""Default plugin object bundling a config store and a reporter"""
from .reporter import Reporter
from .store import ConfigStore
from .utils import kebab_case


class SteamerPlugin:
    """
    What a steamer plugin gets to work with.

    Plugins hold one of these (or subclass it when they only want the
    default hooks). The name defaults to the kebab-cased class name, so
    ``SteamerPluginKit`` reads and writes ``.steamer/steamer-plugin-kit.json``.
    """

    def __init__(self, name: str = None, store: ConfigStore = None, reporter: Reporter = None):
        self.plugin_name = name or kebab_case(type(self).__name__)
        self.reporter = reporter or Reporter(self.plugin_name)
        self.store = store or ConfigStore(self.plugin_name, reporter=self.reporter)

    def init(self):
        return self.reporter.warn("You do not write any init logics.")

    def help(self):
        return self.reporter.warn("You do not add any help content.")

    def version(self) -> str:
        from . import __version__
        return __version__
