"""Click option helpers for flags that cannot be combined."""
import click


class ExclusiveFlag(click.Option):
    """Click option that refuses to be combined with the named options."""

    def __init__(self, *args, **kwargs):
        """Initialize with exclusive_with listing conflicting option names."""
        self.exclusive_with = kwargs.pop("exclusive_with", [])
        super().__init__(*args, **kwargs)

    def handle_parse_result(self, ctx, opts, args):
        """Raise UsageError if this option and a conflicting one were given."""
        if self.name in opts:
            for other in self.exclusive_with:
                if other in opts:
                    msg = f"Options --{self.name} and --{other} are mutually exclusive"
                    raise click.UsageError(msg, ctx=ctx)
        return super().handle_parse_result(ctx, opts, args)
