"""
This module contains the IOInterface abstract base class and its implementations.
"""

from __future__ import annotations

import asyncio
from abc import ABC, abstractmethod
from concurrent.futures import Executor, ThreadPoolExecutor

import aiofiles


class IOInterface(ABC):
    """
    Abstract base class for an IO interface.

    This class defines the interface for input/output operations in the game.
    """

    @abstractmethod
    def output(self, message: str) -> None:
        """Output a message to the interface."""
        pass

    @abstractmethod
    def input(self, prompt: str) -> str:
        """Get input from the user with a prompt."""
        pass


class DummyIOInterface(IOInterface):
    """
    A dummy IO interface for simulation purposes. Does not perform any actual IO.
    """

    def output(self, message: str) -> None:
        """Simulates output operation."""
        pass

    def input(self, prompt: str) -> str:
        """Simulates input operation."""
        return ""


class TestIOInterface(IOInterface):
    """
    A test IO interface. Collects output messages and replays queued input.

    Methods
    -------
    def output(self, message):
        Collect an output message.

    def input(self, prompt):
        Return the next queued response.

    def add_input(self, *responses):
        Queue responses for later prompts.
    """

    __test__ = False

    def __init__(self):
        self.sent_messages = []
        self.prompts = []
        self.input_responses = []

    def output(self, message: str) -> None:
        self.sent_messages.append(message)

    def input(self, prompt: str) -> str:
        self.prompts.append(prompt)
        if self.input_responses:
            return self.input_responses.pop(0)
        raise EOFError("No more input queued in TestIOInterface.")

    def add_input(self, *responses: str) -> None:
        """Queue responses for later prompts."""
        self.input_responses.extend(responses)


class ConsoleIOInterface(IOInterface):
    """
    A console IO interface for interactive gameplay.
    """

    def output(self, message: str) -> None:
        print(message)

    def input(self, prompt: str) -> str:
        return input(prompt)


class LoggingIOInterface(IOInterface):
    """
    Writes a transcript of everything shown to the player to a file.

    Input is read from a wrapped interface and echoed into the transcript, so
    a console game can be recorded as it is played.
    """

    def __init__(self, log_file_path: str, inner: IOInterface | None = None):
        self.log_file_path = log_file_path
        self.inner = inner or DummyIOInterface()

    def output(self, message: str) -> None:
        """Write an output message to the log file and the wrapped interface."""
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(message + "\n")
        self.inner.output(message)

    def input(self, prompt: str) -> str:
        """Read from the wrapped interface and record the exchange."""
        response = self.inner.input(prompt)
        with open(self.log_file_path, "a", encoding="utf-8") as log_file:
            log_file.write(f"{prompt}{response}\n")
        return response

    async def output_async(
        self, message: str, executor: Executor | None = None
    ) -> None:
        """
        Async version of output that keeps all blocking IO off the event loop.

        The transcript line is written through aiofiles and the wrapped
        interface's output runs in `executor` (the loop's default when None).
        """
        async with aiofiles.open(
            self.log_file_path, mode="a", encoding="utf-8"
        ) as log_file:
            await log_file.write(message + "\n")
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(executor, self.inner.output, message)


class AsyncIOInterfaceWrapper:
    """
    Runs the blocking methods of an IOInterface in a worker thread so they can
    be awaited from adapters without stalling the event loop.
    """

    def __init__(self, io_interface: IOInterface):
        self.io_interface = io_interface
        self.executor = ThreadPoolExecutor(max_workers=1)

    async def output(self, message: str) -> None:
        if isinstance(self.io_interface, LoggingIOInterface):
            await self.io_interface.output_async(message, self.executor)
            return
        loop = asyncio.get_running_loop()
        await loop.run_in_executor(self.executor, self.io_interface.output, message)

    async def input(self, prompt: str) -> str:
        loop = asyncio.get_running_loop()
        result = await loop.run_in_executor(
            self.executor, self.io_interface.input, prompt
        )
        return result

    def close(self) -> None:
        self.executor.shutdown(wait=False)
