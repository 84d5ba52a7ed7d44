"""Allow and deny lists used by the path classifier.

The lists are plain relative paths (exact matches) or path prefixes
(directory matches). Prefix entries carry their own trailing slash;
no normalization is applied when matching.
"""

from dataclasses import dataclass

# Prefix under which everything is excluded unless explicitly whitelisted.
CONTENT_PREFIX = "wp-content/"

# External libraries bundled with core, matched as exact paths.
DEFAULT_EXCLUDE_FILES: tuple[str, ...] = (
    "wp-admin/includes/class-ftp-pure.php",
    "wp-admin/includes/class-ftp-sockets.php",
    "wp-admin/includes/class-ftp.php",
    "wp-admin/includes/class-pclzip.php",
    "wp-includes/class-IXR.php",
    "wp-includes/class-json.php",
    "wp-includes/class-phpass.php",
    "wp-includes/class-phpmailer.php",
    "wp-includes/class-pop3.php",
    "wp-includes/class-simplepie.php",
    "wp-includes/class-smtp.php",
    "wp-includes/class-snoopy.php",
)

# Asset and third-party directories, matched as prefixes.
DEFAULT_EXCLUDE_DIRS: tuple[str, ...] = (
    "wp-admin/css/",
    "wp-admin/js/",
    "wp-includes/ID3/",
    "wp-includes/IXR/",
    "wp-includes/SimplePie/",
    "wp-includes/Text/",
    "wp-includes/certificates/",
    "wp-includes/js/",
)

DEFAULT_INCLUDE_CONTENT_FILES: tuple[str, ...] = ("wp-content/plugins/hello.php",)

DEFAULT_INCLUDE_CONTENT_DIRS: tuple[str, ...] = (
    "wp-content/themes/twentyfourteen/",
    "wp-content/themes/twentythirteen/",
    "wp-content/themes/twentytwelve/",
)


@dataclass(frozen=True, slots=True)
class ExclusionLists:
    """Immutable allow/deny configuration for one classification run.

    Attributes:
        exclude_files: Exact relative paths that are always excluded.
        exclude_dirs: Path prefixes that are always excluded.
        include_content_files: Exact paths under wp-content/ that are kept.
        include_content_dirs: Path prefixes under wp-content/ that are kept.
    """

    exclude_files: tuple[str, ...] = ()
    exclude_dirs: tuple[str, ...] = ()
    include_content_files: tuple[str, ...] = ()
    include_content_dirs: tuple[str, ...] = ()

    def __post_init__(self) -> None:
        # Accept any iterable of strings but store tuples so instances stay hashable.
        for name in (
            "exclude_files",
            "exclude_dirs",
            "include_content_files",
            "include_content_dirs",
        ):
            value = getattr(self, name)
            if isinstance(value, str):
                msg = f"{name} must be a sequence of paths, not a single string"
                raise TypeError(msg)
            object.__setattr__(self, name, tuple(value))

    @classmethod
    def default(cls) -> "ExclusionLists":
        """Return the built-in lists for a stock WordPress checkout."""
        return cls(
            exclude_files=DEFAULT_EXCLUDE_FILES,
            exclude_dirs=DEFAULT_EXCLUDE_DIRS,
            include_content_files=DEFAULT_INCLUDE_CONTENT_FILES,
            include_content_dirs=DEFAULT_INCLUDE_CONTENT_DIRS,
        )

    @property
    def total(self) -> int:
        """Total number of entries across all four lists."""
        return (
            len(self.exclude_files)
            + len(self.exclude_dirs)
            + len(self.include_content_files)
            + len(self.include_content_dirs)
        )
