from contextlib import contextmanager


class ConfigError(Exception):
    pass


class ConfigManager(dict):
    pass


def create_config(default):
    _config = ConfigManager(default)

    def set_(name, var):
        """
        set a configuration.
        """
        if name in _config:
            _config[name] = var
        else:
            raise ConfigError("No configuration named {} found.".format(name))

    def get_(name):
        """
        get a configuration.
        """
        if name in _config:
            return _config[name]
        raise ConfigError("No configuration named {} found.".format(name))

    def regist_(name, var=None):
        """
        regist a configuration.
        """
        if name in _config:
            raise ConfigError(
                "Configuration named {} already exists.".format(name)
            )
        if var is None:

            def regist(f):
                _config[name] = f
                return f

            return regist
        _config[name] = var
        return var

    return set_, get_, regist_


set_config, get_config, regist_config = create_config(
    {"dtype": "float64", "complex_dtype": "complex128"}
)


@contextmanager
def temp_config(name, var):
    tmp = get_config(name)
    set_config(name, var)
    try:
        yield var
    finally:
        set_config(name, tmp)


def load_config(name):
    """
    Apply every top level entry of a configuration file with :func:`set_config`.

    :param name: File name, yml or json.
    :return: Dictionary read from the file.
    """
    from .utils import load_config_file

    dic = load_config_file(name)
    if dic is None:
        return {}
    for k, v in dic.items():
        set_config(k, v)
    return dic
