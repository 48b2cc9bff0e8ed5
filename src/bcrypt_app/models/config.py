"""Resolved run configuration for a single bcrypt invocation."""

from enum import Enum, IntEnum

from pydantic import BaseModel, Field

DEFAULT_COST = 12
DEFAULT_TYPE = "2b"
DEFAULT_EOL = "\n"

MIN_COST = 5
MAX_COST = 31

SALT_LENGTH = 16
SALT_ENCODING = "utf-8"


class HashType(str, Enum):
    """bcrypt variant identifiers."""

    TWO_A = "2a"
    TWO_B = "2b"
    TWO_X = "2x"
    TWO_Y = "2y"


class RunMode(str, Enum):
    """What a single invocation does."""

    UPDATE_MODULES = "update-modules"
    VERSION = "version"
    HELP = "help"
    RUN = "run"


class ExitCode(IntEnum):
    """Process exit statuses."""

    SUCCESS = 0
    NO_MATCH = 1
    INVALID_INPUT = 2
    FAILURE = 3


# Administrative modes in priority order. The first flag that is set wins.
RUN_MODE_PRIORITY: tuple[tuple[RunMode, str], ...] = (
    (RunMode.UPDATE_MODULES, "update_modules"),
    (RunMode.VERSION, "version"),
    (RunMode.HELP, "help"),
)


class Configuration(BaseModel):
    """Options for one run, merged from defaults, environment and flags."""

    cost: str = Field(
        default=str(DEFAULT_COST),
        description="Cost factor as given; checked by the validator",
    )
    type: str = Field(default=DEFAULT_TYPE, description="bcrypt variant identifier")
    salt: bytes = Field(..., description="Raw salt octets")
    salt_error: str | None = Field(None, description="Why the given salt could not be encoded")
    password: str | None = Field(None, description="Password given on the command line")
    compare: str | None = Field(None, description="Hash to compare the password against")
    eol: str = Field(default=DEFAULT_EOL, description="Terminator written after the hash")
    no_eol: bool = False
    quiet: bool = False
    debug: bool = False
    help: bool = False
    version: bool = False
    update_modules: bool = False

    model_config = {"extra": "forbid"}

    @property
    def cost_factor(self) -> int:
        """The cost as an integer. Only meaningful after validation."""
        return int(self.cost)

    @property
    def hash_type(self) -> HashType:
        return HashType(self.type)

    @property
    def terminator(self) -> str:
        return "" if self.no_eol else self.eol

    @property
    def is_compare(self) -> bool:
        return self.compare is not None

    @property
    def run_mode(self) -> RunMode:
        """Pick the run mode from the administrative flags."""
        for mode, flag in RUN_MODE_PRIORITY:
            if getattr(self, flag):
                return mode
        return RunMode.RUN

    def describe(self) -> dict[str, object]:
        """Loggable view of the configuration, without the password."""
        data = self.model_dump(exclude={"password", "salt"})
        data["password_given"] = self.password is not None
        data["salt_length"] = len(self.salt)
        return data
