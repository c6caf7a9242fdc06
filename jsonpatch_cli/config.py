import os

from traitlets import Unicode, Enum, Float, Bool, HasTraits
from traitlets.config.loader import JSONFileConfigLoader, ConfigFileNotFound


CONFIG_BASENAME = 'jsonpatch_config'

apply_error_policies = ('edit-base', 'fail')


class JSONPatchConfigurable(HasTraits):

    def configured_traits(self, cls):
        traits = cls.class_own_traits(config=True)
        c = {}
        for name, _ in traits.items():
            c[name] = getattr(self, name)
        return c


_config_cache = {}
def config_instance(cls):
    if cls in _config_cache:
        return _config_cache[cls]
    instance = _config_cache[cls] = cls()
    return instance


def config_path():
    """Directories searched for config files, in descending priority."""
    return [
        os.getcwd(),
        os.path.join(os.path.expanduser('~'), '.config', 'jsonpatch'),
    ]


def _load_config_files(basefilename, path=None):
    """Load config files (json) by filename and path.

    yield each config object in turn.
    """

    if not isinstance(path, list):
        path = [path]
    for path in path[::-1]:
        # path list is in descending priority order, so load files backwards:
        loader = JSONFileConfigLoader(basefilename+'.json', path=path)
        config = None
        try:
            config = loader.load_config()
        except ConfigFileNotFound:
            pass
        if config:
            yield config


def recursive_update(target, new, include_none):
    """Recursively update one dictionary using another.

    None values will delete their keys.
    """
    for k, v in new.items():
        if isinstance(v, dict):
            if k not in target:
                target[k] = {}
            recursive_update(target[k], v, include_none)
            if not include_none and not target[k]:
                # Prune empty subdicts
                del target[k]

        elif not include_none and v is None:
            target.pop(k, None)

        else:
            target[k] = v


def build_config(entrypoint, include_none=False):
    if entrypoint not in entrypoint_configurables:
        raise ValueError('Config for entrypoint name %r is not defined! Accepted values are %r.' % (
            entrypoint, list(entrypoint_configurables.keys())
        ))

    # Get config from disk:
    disk_config = {}
    for c in _load_config_files(CONFIG_BASENAME, path=config_path()):
        recursive_update(disk_config, c, include_none)

    config = {}
    configurable = entrypoint_configurables[entrypoint]
    for c in reversed(configurable.mro()):
        if issubclass(c, JSONPatchConfigurable):
            recursive_update(config, config_instance(c).configured_traits(c), include_none)
            if (c.__name__ in disk_config):
                recursive_update(config, disk_config[c.__name__], include_none)

    return config


def get_defaults_for_argparse(entrypoint):
    return build_config(entrypoint)


class Global(JSONPatchConfigurable):

    log_level = Enum(
        ('DEBUG', 'INFO', 'WARN', 'ERROR', 'CRITICAL'),
        'INFO',
        help="Set the log level by name.",
    ).tag(config=True)


class Diff(Global):
    pass


class Apply(Global):
    pass


class Edit(Global):

    editor = Unicode(
        None,
        allow_none=True,
        help="the editor command to run on the patched document. "
             "Defaults to $VISUAL, then $EDITOR, then vim.",
    ).tag(config=True)

    watch = Bool(
        False,
        help="keep watching the patched document and rewrite the "
             "patch file on every save.",
    ).tag(config=True)

    on_apply_error = Enum(
        apply_error_policies,
        'edit-base',
        help="what to do when the existing patch does not apply: "
             "'edit-base' edits the unpatched input, 'fail' aborts.",
    ).tag(config=True)

    debounce = Float(
        0.2,
        help="seconds to wait for further saves before recomputing "
             "the patch in watch mode.",
    ).tag(config=True)

    use_color = Bool(
        True,
        help="use ANSI color codes when printing patch changes.",
    ).tag(config=True)


entrypoint_configurables = {
    'json-patch-diff': Diff,
    'json-patch-apply': Apply,
    'json-patch-edit': Edit,
}