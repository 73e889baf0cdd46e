"""The kimono command: module tidying, go.work toggling and version tags for repositories holding several Go modules."""