class Interface:

    def __init__(self):
        self.controller = None

    def onStart(self):
        self.notifyRedraw()

    def onEvent(self, event):
        """
        Invoked when a game event is performed.
        :param event:
        :return:
        """
        self.notifyRedraw()

    def onMessage(self, message: str):
        """
        Invoked when an action is refused and the player should be told why.
        """
        pass

    def notifyRedraw(self):
        pass

    def onWin(self):
        pass
