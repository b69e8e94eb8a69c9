import os
import tqdm


class Logger:
    """
    Class for logging of cube playback

    Parameters
    ----------
    `log_dir` : str
        directory for logging
    `log_filename` : str
        name of file to save logging
    `clear` : bool
        whether clear logging file on start
    `pbar` : tqdm, optional
        save tqdm progress bar as object attribute
    `verbose` : bool
        whether print messages when there is no progress bar
    """
    def __init__(self, log_dir : str = '', log_filename : str = '', clear : bool = False, pbar : tqdm.tqdm = None, verbose : bool = True):
        self.pbar     = pbar
        self.path     = log_dir
        self.filename = log_filename
        self.filepath = os.path.join(log_dir, log_filename) if log_filename else ''
        self.verbose  = verbose
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        if self.filepath and clear:
            open(self.filepath, 'w').close()

    def tqdmlog(self, message : str, pbar : tqdm.tqdm = None, to_file : bool = False, attention : bool = False, add_iter_num : bool = False):
        """
        Log message without breaking tqdm progress bar

        Parameters
        ----------
        `message` : str
            Message to log
        `pbar` : tqdm, optional
            tqdm progress bar to write
        `to_file` : bool, optional
            where save log message in file
        `attention` : bool, optional
            whether add '=' sign as attention to message
        `add_iter_num` : bool, optional
            whether add prefix as iteration number to message
        """
        pbar = pbar if pbar is not None else self.pbar
        if add_iter_num and pbar is not None:
            message = f'{pbar.n:5} | {message}'
        if to_file:
            self.filelog(message)
        if pbar is None and not self.verbose:
            return
        write = pbar.write if pbar is not None else tqdm.tqdm.write
        if attention:
            write('='*len(message))
        write(message)
        if attention:
            write('='*len(message))

    def filelog(self, message : str, filepath : str = None):
        """
        Write message to file

        Parameters
        ----------
        `message` : str
            message to log
        `filepath`: str
            Path to file to add save message
        """
        filepath = filepath if filepath is not None else self.filepath
        if filepath:
            with open(filepath, 'a') as f:
                f.write(message + '\n')

    def alert(self, error : BaseException):
        """
        Show error to the user and keep it in the log file.
        Shown even when the logger is not verbose.
        """
        message = f'Error: {error}'
        self.filelog(message)
        write = self.pbar.write if self.pbar is not None else tqdm.tqdm.write
        write(message)
