import yaml

from defaults import DEFAULT_ANIMATION_SPEED, DEFAULT_SCRAMBLE_TURNS, FACELET_SIZE, FACELET_RADIUS

"""
Parameters used when config file does not set them
"""
DEFAULT_PARAMS = {
    'animation_speed' : DEFAULT_ANIMATION_SPEED,
    'scramble_turns'  : DEFAULT_SCRAMBLE_TURNS,
    'max_frames'      : 100000,
    'facelet_size'    : FACELET_SIZE,
    'facelet_radius'  : FACELET_RADIUS,
    'log_path'        : '',
    'log_filename'    : '',
    'clear_log'       : False,
}


class YParams:
    """
    Class to save parameters from yaml config file
    Parameters of the config file will be saved as object attributes,
    missing parameters get their default values

    Parameters
    ----------
    `filepath` : str, optional
        Path to config file with parameters. Only defaults are used if not passed.
    `overrides` : dict, optional
        Parameters replacing values of the config file, None values are ignored
    """
    def __init__(self, filepath : str = None, overrides : dict = None):
        self.filepath = filepath
        self._load_params(overrides or {})

    def _load_params(self, overrides : dict):
        """
        Load parameters from config file
        """
        params = dict(DEFAULT_PARAMS)
        if self.filepath:
            with open(self.filepath) as f:
                params.update(yaml.safe_load(f) or {})
        params.update({name: value for name, value in overrides.items() if value is not None})
        self.kw = {}
        for param_name, param_value in params.items():
            self.kw[param_name] = param_value
            setattr(self, param_name, param_value)

    def display(self, log_function=print):
        for param_name, param_value in self.kw.items():
            log_function(f'{param_name}: {param_value}')
