from chessimage.app import main

main()
